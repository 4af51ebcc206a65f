"""Hierarchical browse endpoints (sector -> wilayat -> category -> schools)."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, Query, status

from ...data.catalogue import CatalogueStore
from ...models.domain import Region, Wilayat
from ...schemas.schools import HierarchyNodeModel, RegionTreeModel, SchoolModel, WilayatTreeModel
from ...services.catalogue import (
    HierarchyNode,
    group_by_region_and_wilayat,
    list_categories,
    list_regions,
    list_wilayats,
    schools_for_category,
)
from ..dependencies import get_store

router = APIRouter(prefix="/browse", tags=["browse"])


def _nodes(nodes: List[HierarchyNode]) -> List[HierarchyNodeModel]:
    return [HierarchyNodeModel(label=node.label, count=node.count) for node in nodes]


@router.get("/regions", response_model=List[HierarchyNodeModel], status_code=status.HTTP_200_OK)
def browse_regions(store: CatalogueStore = Depends(get_store)) -> List[HierarchyNodeModel]:
    return _nodes(list_regions(store.records))


@router.get("/regions/{region}/wilayats", response_model=List[HierarchyNodeModel], status_code=status.HTTP_200_OK)
def browse_wilayats(region: Region, store: CatalogueStore = Depends(get_store)) -> List[HierarchyNodeModel]:
    return _nodes(list_wilayats(store.records, region))


@router.get("/wilayats/{wilayat}/categories", response_model=List[HierarchyNodeModel], status_code=status.HTTP_200_OK)
def browse_categories(wilayat: Wilayat, store: CatalogueStore = Depends(get_store)) -> List[HierarchyNodeModel]:
    return _nodes(list_categories(store.records, wilayat))


@router.get("/wilayats/{wilayat}/schools", response_model=List[SchoolModel], status_code=status.HTTP_200_OK)
def browse_category_schools(
    wilayat: Wilayat,
    category: str = Query(..., description="Category label as returned by the categories endpoint."),
    store: CatalogueStore = Depends(get_store),
) -> List[SchoolModel]:
    return [SchoolModel.from_domain(school) for school in schools_for_category(store.records, wilayat, category)]


@router.get("/tree", response_model=List[RegionTreeModel], status_code=status.HTTP_200_OK)
def browse_tree(store: CatalogueStore = Depends(get_store)) -> List[RegionTreeModel]:
    tree: List[RegionTreeModel] = []
    for region, wilayats in group_by_region_and_wilayat(store.records).items():
        branches = [
            WilayatTreeModel(
                wilayat=wilayat,
                count=len(schools),
                schools=[SchoolModel.from_domain(school) for school in schools],
            )
            for wilayat, schools in wilayats.items()
        ]
        tree.append(RegionTreeModel(region=region, count=sum(branch.count for branch in branches), wilayats=branches))
    return tree
