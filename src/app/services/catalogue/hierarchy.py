"""Drill-down grouping of schools: region -> wilayat -> category -> schools.

Category labels come from a small rule table keyed by school type. Government
schools are split by the gender they serve ("مدارس حكومية (ذكور)" etc.), the
other types group under their own label. New types register a rule with
``register_rule``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Sequence

from ...models.domain import Region, School, SchoolType, Wilayat

GOVERNMENT_GROUP_PREFIX = "مدارس حكومية"


@dataclass(frozen=True)
class GroupingRule:
    category: SchoolType
    label_for: Callable[[School], str]


@dataclass(frozen=True)
class HierarchyNode:
    label: str
    count: int


def _by_category(school: School) -> str:
    return school.category.value


def _by_category_and_gender(school: School) -> str:
    return f"{GOVERNMENT_GROUP_PREFIX} ({school.gender.value})"


_RULES: dict[SchoolType, GroupingRule] = {}


def register_rule(rule: GroupingRule) -> None:
    _RULES[rule.category] = rule


def rule_for(category: SchoolType) -> GroupingRule:
    return _RULES.get(category) or GroupingRule(category, _by_category)


register_rule(GroupingRule(SchoolType.GOVERNMENT, _by_category_and_gender))
register_rule(GroupingRule(SchoolType.PRIVATE, _by_category))
register_rule(GroupingRule(SchoolType.KINDERGARTEN, _by_category))


def category_label(school: School) -> str:
    return rule_for(school.category).label_for(school)


def _count_in_order(labels: Iterable[str]) -> list[HierarchyNode]:
    counts: dict[str, int] = {}
    for label in labels:
        counts[label] = counts.get(label, 0) + 1
    return [HierarchyNode(label, count) for label, count in counts.items()]


def list_regions(schools: Sequence[School]) -> list[HierarchyNode]:
    return _count_in_order(school.region.value for school in schools)


def list_wilayats(schools: Sequence[School], region: Region) -> list[HierarchyNode]:
    return _count_in_order(school.wilayat.value for school in schools if school.region == region)


def list_categories(schools: Sequence[School], wilayat: Wilayat) -> list[HierarchyNode]:
    return _count_in_order(category_label(school) for school in schools if school.wilayat == wilayat)


def schools_for_category(schools: Sequence[School], wilayat: Wilayat, label: str) -> list[School]:
    return [
        school
        for school in schools
        if school.wilayat == wilayat and category_label(school) == label
    ]


def group_by_region_and_wilayat(schools: Sequence[School]) -> dict[str, dict[str, list[School]]]:
    """Nested region -> wilayat -> schools mapping used by the side drawer."""

    groups: dict[str, dict[str, list[School]]] = {}
    for school in schools:
        by_wilayat = groups.setdefault(school.region.value, {})
        by_wilayat.setdefault(school.wilayat.value, []).append(school)
    return groups
