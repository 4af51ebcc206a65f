"""Map projection endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status

from ...data.catalogue import CatalogueStore
from ...schemas.schools import MapViewResponse, SchoolModel
from ...services.catalogue import filter_schools
from ...services.views import build_map_view
from ..dependencies import get_store

router = APIRouter(prefix="/map", tags=["map"])


@router.get("", response_model=MapViewResponse, status_code=status.HTTP_200_OK)
def get_map_view(
    preview_limit: int | None = Query(default=None, ge=0, description="Override for the schools listed under the map."),
    store: CatalogueStore = Depends(get_store),
) -> MapViewResponse:
    matched = filter_schools(store.records, store.get_criteria())
    view = build_map_view(matched, preview_limit=preview_limit)
    view["preview"] = [SchoolModel.from_domain(school) for school in view["preview"]]
    return MapViewResponse(**view)
