"""In-memory catalogue of schools and the live filter criteria."""

from __future__ import annotations

import functools
from dataclasses import replace
from typing import Any, Iterable, Optional

from ..models.domain import (
    ALL,
    FILTER_FIELDS,
    REGION_WILAYATS,
    FilterCriteria,
    Region,
    RegionFilter,
    School,
    SchoolType,
)
from .schools_repository import load_schools


class CatalogueStore:
    """Owns the read-only school collection and the single FilterCriteria."""

    def __init__(self, records: Iterable[School] = ()) -> None:
        self._records: tuple[School, ...] = tuple(records)
        self._criteria = FilterCriteria()

    @property
    def records(self) -> tuple[School, ...]:
        return self._records

    def load(self, records: Iterable[School]) -> None:
        self._records = tuple(records)

    def find(self, school_id: str) -> Optional[School]:
        for school in self._records:
            if school.id == school_id:
                return school
        return None

    def get_criteria(self) -> FilterCriteria:
        return replace(self._criteria)

    def set_criteria(self, **partial: Any) -> FilterCriteria:
        """Overwrite the given fields unconditionally."""

        for name, value in partial.items():
            if name not in FILTER_FIELDS:
                raise TypeError(f"Unknown filter field '{name}'")
            setattr(self._criteria, name, value)
        self._constrain_wilayat()
        return self.get_criteria()

    def toggle_filter(self, name: str, value: Any) -> FilterCriteria:
        """Select ``value``, or reset the field to ALL if it is already selected."""

        if name not in FILTER_FIELDS or name == "query":
            raise TypeError(f"Field '{name}' cannot be toggled")
        current = getattr(self._criteria, name)
        setattr(self._criteria, name, ALL if current == value else value)
        self._constrain_wilayat()
        return self.get_criteria()

    def select_region(self, region: RegionFilter) -> FilterCriteria:
        # A concrete sector opens on its government schools; the total tile shows everything.
        self._criteria.region = region
        self._criteria.wilayat = ALL
        self._criteria.category = ALL if region == ALL else SchoolType.GOVERNMENT
        return self.get_criteria()

    def reset_criteria(self) -> FilterCriteria:
        self._criteria = FilterCriteria()
        return self.get_criteria()

    def _constrain_wilayat(self) -> None:
        criteria = self._criteria
        if criteria.region == ALL or criteria.wilayat == ALL:
            return
        if criteria.wilayat not in REGION_WILAYATS.get(Region(criteria.region), ()):
            criteria.wilayat = ALL


@functools.lru_cache(maxsize=1)
def get_store() -> CatalogueStore:
    """Process-wide store loaded from the bundled dataset."""

    return CatalogueStore(load_schools())
