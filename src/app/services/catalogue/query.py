"""Filtering, relevance ordering and aggregation over the school catalogue."""

from __future__ import annotations

from typing import Iterable, Sequence, TypedDict

from ...models.domain import (
    ALL,
    REGION_WILAYATS,
    FilterCriteria,
    Region,
    RegionFilter,
    School,
    Wilayat,
)


class SummaryCounts(TypedDict):
    total: int
    regions: dict[Region, int]


def _matches_query(school: School, query: str) -> bool:
    if not query:
        return True
    if query in school.name:
        return True
    return bool(school.area) and query in school.area


def _matches(selected: object, value: object) -> bool:
    return selected == ALL or selected == value


def matches_stats_criteria(school: School, criteria: FilterCriteria) -> bool:
    """Predicate for aggregate views: every condition except the category."""

    return (
        _matches_query(school, criteria.query)
        and _matches(criteria.region, school.region)
        and _matches(criteria.wilayat, school.wilayat)
        and _matches(criteria.gender, school.gender)
    )


def matches_criteria(school: School, criteria: FilterCriteria) -> bool:
    return matches_stats_criteria(school, criteria) and _matches(criteria.category, school.category)


def _relevance_tier(school: School, query: str) -> int:
    if school.name == query:
        return 0
    if school.name.startswith(query):
        return 1
    return 2


def rank_by_relevance(schools: Sequence[School], query: str) -> list[School]:
    """Exact name matches first, then prefix matches, then the rest (stable)."""

    needle = query.strip()
    return sorted(schools, key=lambda school: _relevance_tier(school, needle))


def filter_schools(schools: Iterable[School], criteria: FilterCriteria) -> list[School]:
    matched = [school for school in schools if matches_criteria(school, criteria)]
    if criteria.query:
        return rank_by_relevance(matched, criteria.query)
    return matched


def category_breakdown(schools: Iterable[School], criteria: FilterCriteria) -> dict[str, int]:
    """Count schools per category label, in first-encountered order.

    Uses the relaxed predicate so that narrowing to one category does not hide
    the rest of the mix for the selected region and wilayat.
    """

    counts: dict[str, int] = {}
    for school in schools:
        if not matches_stats_criteria(school, criteria):
            continue
        label = school.category.value
        counts[label] = counts.get(label, 0) + 1
    return counts


def summary_counts(schools: Sequence[School]) -> SummaryCounts:
    """Tile counts over the full collection; never affected by the criteria."""

    per_region = {region: 0 for region in Region}
    for school in schools:
        per_region[school.region] = per_region.get(school.region, 0) + 1
    return SummaryCounts(total=len(schools), regions=per_region)


def available_wilayats(region: RegionFilter) -> list[Wilayat]:
    if region == ALL:
        return list(Wilayat)
    try:
        return list(REGION_WILAYATS[Region(region)])
    except ValueError:
        return []
