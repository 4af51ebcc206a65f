"""Filter criteria endpoints."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from ...models.domain import ALL, Gender, Region, SchoolType, Wilayat
from ...schemas.schools import (
    FilterCriteriaModel,
    FilterUpdateRequest,
    RegionSelectRequest,
    ToggleFilterRequest,
)
from ...services.catalogue import available_wilayats
from ...services.session import AppSession
from ..dependencies import get_session

router = APIRouter(prefix="/filters", tags=["filters"])

_TOGGLE_FIELDS = {
    "region": ("region", Region),
    "wilayat": ("wilayat", Wilayat),
    "type": ("category", SchoolType),
    "gender": ("gender", Gender),
}


def _criteria(session: AppSession) -> FilterCriteriaModel:
    return FilterCriteriaModel.from_domain(session.store.get_criteria())


@router.get("", response_model=FilterCriteriaModel, status_code=status.HTTP_200_OK)
def get_filters(session: AppSession = Depends(get_session)) -> FilterCriteriaModel:
    return _criteria(session)


@router.patch("", response_model=FilterCriteriaModel, status_code=status.HTTP_200_OK)
def update_filters(
    request: FilterUpdateRequest,
    session: AppSession = Depends(get_session),
) -> FilterCriteriaModel:
    session.update_criteria(**request.to_partial())
    return _criteria(session)


@router.post("/toggle", response_model=FilterCriteriaModel, status_code=status.HTTP_200_OK)
def toggle_filter(
    request: ToggleFilterRequest,
    session: AppSession = Depends(get_session),
) -> FilterCriteriaModel:
    name, enum_type = _TOGGLE_FIELDS[request.field]
    if request.value == ALL:
        value = ALL
    else:
        try:
            value = enum_type(request.value)
        except ValueError as exc:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Invalid value '{request.value}' for filter '{request.field}'.",
            ) from exc
    session.toggle_filter(name, value)
    return _criteria(session)


@router.post("/region", response_model=FilterCriteriaModel, status_code=status.HTTP_200_OK)
def select_region(
    request: RegionSelectRequest,
    session: AppSession = Depends(get_session),
) -> FilterCriteriaModel:
    session.select_region(request.region)
    return _criteria(session)


@router.post("/reset", response_model=FilterCriteriaModel, status_code=status.HTTP_200_OK)
def reset_filters(session: AppSession = Depends(get_session)) -> FilterCriteriaModel:
    session.store.reset_criteria()
    return _criteria(session)


@router.get("/wilayats", response_model=List[Wilayat], status_code=status.HTTP_200_OK)
def list_available_wilayats(session: AppSession = Depends(get_session)) -> List[Wilayat]:
    return available_wilayats(session.store.get_criteria().region)
