"""Catalogue query helpers."""

from .hierarchy import (
    HierarchyNode,
    category_label,
    group_by_region_and_wilayat,
    list_categories,
    list_regions,
    list_wilayats,
    schools_for_category,
)
from .query import (
    available_wilayats,
    category_breakdown,
    filter_schools,
    matches_criteria,
    matches_stats_criteria,
    SummaryCounts,
    rank_by_relevance,
    summary_counts,
)

__all__ = [
    "filter_schools",
    "matches_criteria",
    "matches_stats_criteria",
    "rank_by_relevance",
    "category_breakdown",
    "summary_counts",
    "SummaryCounts",
    "available_wilayats",
    "HierarchyNode",
    "category_label",
    "list_regions",
    "list_wilayats",
    "list_categories",
    "schools_for_category",
    "group_by_region_and_wilayat",
]
