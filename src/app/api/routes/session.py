"""UI session and share endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from ...config import settings
from ...schemas.schools import SchoolModel
from ...schemas.session import (
    DeepLinkRequest,
    DrawerRequest,
    SelectSchoolRequest,
    SessionStateModel,
    ShareResponse,
    TabRequest,
)
from ...services.session import AppSession
from ...services.sharing import CapturingClipboard, ShareResult, share_app, share_school
from ..dependencies import get_session

router = APIRouter(tags=["session"])


def _state(session: AppSession) -> SessionStateModel:
    state = session.snapshot()
    selected = session.selected_school
    return SessionStateModel.from_state(state, SchoolModel.from_domain(selected) if selected else None)


def _share_response(session: AppSession, result: ShareResult) -> ShareResponse:
    session.show_toast(result.message)
    return ShareResponse(url=result.url, message=result.message, copied=result.copied)


@router.get("/session", response_model=SessionStateModel, status_code=status.HTTP_200_OK)
def get_session_state(session: AppSession = Depends(get_session)) -> SessionStateModel:
    return _state(session)


@router.post("/session/tab", response_model=SessionStateModel, status_code=status.HTTP_200_OK)
def select_tab(request: TabRequest, session: AppSession = Depends(get_session)) -> SessionStateModel:
    session.select_tab(request.tab)
    return _state(session)


@router.post("/session/drawer", response_model=SessionStateModel, status_code=status.HTTP_200_OK)
def set_drawer(request: DrawerRequest, session: AppSession = Depends(get_session)) -> SessionStateModel:
    if request.open:
        session.open_drawer()
    else:
        session.close_drawer()
    return _state(session)


@router.post("/session/select", response_model=SessionStateModel, status_code=status.HTTP_200_OK)
def select_school(request: SelectSchoolRequest, session: AppSession = Depends(get_session)) -> SessionStateModel:
    try:
        session.select_school(request.schoolId)
    except LookupError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return _state(session)


@router.post("/session/deep-link", response_model=SessionStateModel, status_code=status.HTTP_200_OK)
def open_deep_link(request: DeepLinkRequest, session: AppSession = Depends(get_session)) -> SessionStateModel:
    """Apply the id from the page URL on load; unknown ids leave the state untouched."""
    if request.schoolId:
        session.navigation.set(settings.share_param, request.schoolId)
    session.resolve_deep_link()
    return _state(session)


@router.post("/share/app", response_model=ShareResponse, status_code=status.HTTP_200_OK)
def share_application(session: AppSession = Depends(get_session)) -> ShareResponse:
    return _share_response(session, share_app(CapturingClipboard()))


@router.post("/share/schools/{school_id}", response_model=ShareResponse, status_code=status.HTTP_200_OK)
def share_school_link(school_id: str, session: AppSession = Depends(get_session)) -> ShareResponse:
    school = session.store.find(school_id)
    if school is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"School '{school_id}' not found.")
    return _share_response(session, share_school(CapturingClipboard(), school))
