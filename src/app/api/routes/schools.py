"""School catalogue endpoints."""

from __future__ import annotations

from typing import Literal

from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import Response

from ...data.catalogue import CatalogueStore
from ...schemas.schools import MapLinkResponse, SchoolListResponse, SchoolModel
from ...services.catalogue import filter_schools
from ...services.export import schools_to_csv, schools_to_xlsx
from ...services.session import AppSession
from ...services.sharing import map_search_url
from ...services.views import cap
from ..dependencies import get_session, get_store

router = APIRouter(prefix="/schools", tags=["schools"])

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


@router.get("", response_model=SchoolListResponse, status_code=status.HTTP_200_OK)
def list_schools(
    limit: int | None = Query(default=None, ge=0, description="Optional display cap on returned records."),
    session: AppSession = Depends(get_session),
) -> SchoolListResponse:
    store = session.store
    matched = filter_schools(store.records, store.get_criteria())
    return SchoolListResponse(
        items=[SchoolModel.from_domain(school) for school in cap(matched, limit)],
        total=len(matched),
        showResults=session.snapshot().show_results,
    )


@router.get("/export", status_code=status.HTTP_200_OK)
def export_schools(
    format: Literal["csv", "xlsx"] = Query(default="csv", description="Export file format."),
    store: CatalogueStore = Depends(get_store),
) -> Response:
    matched = filter_schools(store.records, store.get_criteria())
    if format == "csv":
        return Response(
            content=schools_to_csv(matched),
            media_type="text/csv; charset=utf-8",
            headers={"Content-Disposition": 'attachment; filename="schools.csv"'},
        )
    return Response(
        content=schools_to_xlsx(matched),
        media_type=XLSX_MEDIA_TYPE,
        headers={"Content-Disposition": 'attachment; filename="schools.xlsx"'},
    )


@router.get("/{school_id}", response_model=SchoolModel, status_code=status.HTTP_200_OK)
def get_school(school_id: str, store: CatalogueStore = Depends(get_store)) -> SchoolModel:
    school = store.find(school_id)
    if school is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"School '{school_id}' not found.")
    return SchoolModel.from_domain(school)


@router.get("/{school_id}/map-link", response_model=MapLinkResponse, status_code=status.HTTP_200_OK)
def get_school_map_link(school_id: str, store: CatalogueStore = Depends(get_store)) -> MapLinkResponse:
    school = store.find(school_id)
    if school is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"School '{school_id}' not found.")
    return MapLinkResponse(url=map_search_url(school))
