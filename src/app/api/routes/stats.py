"""Statistics endpoints."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, status

from ...data.catalogue import CatalogueStore
from ...schemas.schools import CategorySliceModel, RegionCountModel, SummaryResponse
from ...services.catalogue import SummaryCounts, summary_counts
from ...services.views import build_category_chart
from ..dependencies import get_store

router = APIRouter(prefix="/stats", tags=["stats"])


@router.get("/summary", response_model=SummaryResponse, status_code=status.HTTP_200_OK)
def get_summary(store: CatalogueStore = Depends(get_store)) -> SummaryResponse:
    counts: SummaryCounts = summary_counts(store.records)
    return SummaryResponse(
        total=counts["total"],
        regions=[RegionCountModel(region=region, count=count) for region, count in counts["regions"].items()],
    )


@router.get("/categories", response_model=List[CategorySliceModel], status_code=status.HTTP_200_OK)
def get_category_breakdown(store: CatalogueStore = Depends(get_store)) -> List[CategorySliceModel]:
    chart = build_category_chart(store.records, store.get_criteria())
    return [CategorySliceModel(**entry) for entry in chart]
