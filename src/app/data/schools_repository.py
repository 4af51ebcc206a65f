"""Data access helpers for loading the bundled school dataset."""

from __future__ import annotations

import functools
import json
import logging
from pathlib import Path
from typing import Any, Iterable, Optional

from ..config import settings
from ..models.domain import (
    WILAYAT_REGION,
    ContactInfo,
    Coordinates,
    Gender,
    Region,
    School,
    SchoolType,
    Shift,
    Wilayat,
)

logger = logging.getLogger(__name__)


def _clean(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _coerce_coordinates(value: Any) -> Optional[Coordinates]:
    if not isinstance(value, dict):
        return None
    lat, lng = value.get("lat"), value.get("lng")
    if isinstance(lat, bool) or isinstance(lng, bool):
        return None
    if not isinstance(lat, (int, float)) or not isinstance(lng, (int, float)):
        return None
    return Coordinates(lat=float(lat), lng=float(lng))


def _coerce_contact(value: Any) -> ContactInfo:
    if not isinstance(value, dict):
        return ContactInfo()
    return ContactInfo(
        phone=_clean(value.get("phone")),
        manager_name=_clean(value.get("managerName")),
        assistant_name=_clean(value.get("assistantName")),
        assistant_phone=_clean(value.get("assistantPhone")),
        email=_clean(value.get("email")),
        website=_clean(value.get("website")),
    )


def parse_school(row: dict) -> School:
    """Build a School from one dataset entry (original camelCase field names)."""

    try:
        school_id = _clean(row.get("id"))
        if not school_id:
            raise ValueError("School record is missing an id.")
        return School(
            id=school_id,
            name=(row.get("name") or "").strip(),
            region=Region(row["region"]),
            wilayat=Wilayat(row["wilayat"]),
            area=_clean(row.get("area")),
            category=SchoolType(row["type"]),
            grades=(row.get("grades") or "").strip(),
            gender=Gender(row["gender"]),
            shift=Shift(row.get("shift") or Shift.MORNING.value),
            coordinates=_coerce_coordinates(row.get("coordinates")),
            contact=_coerce_contact(row.get("contact")),
            quality_score=int(row.get("qualityScore") or 0),
            source=(row.get("source") or "").strip(),
            is_verified=bool(row.get("isVerified", False)),
        )
    except KeyError as exc:
        raise ValueError(f"School record '{row.get('id')}' is missing field {exc}") from exc


def validate_schools(schools: Iterable[School]) -> None:
    """Reject duplicate ids and wilayats filed under the wrong region."""

    seen: set[str] = set()
    for school in schools:
        if school.id in seen:
            raise ValueError(f"Duplicate school id '{school.id}' in dataset.")
        seen.add(school.id)
        if WILAYAT_REGION[school.wilayat] is not school.region:
            raise ValueError(
                f"School '{school.id}' lists wilayat '{school.wilayat.value}' "
                f"under region '{school.region.value}'."
            )


@functools.lru_cache(maxsize=1)
def load_schools(source: Optional[Path] = None) -> tuple[School, ...]:
    """Load schools from the configured JSON file."""

    json_path = source or settings.schools_file
    if not json_path.exists():
        raise FileNotFoundError(f"School dataset not found: {json_path}")

    with json_path.open(mode="r", encoding="utf-8-sig") as handle:
        try:
            payload = json.load(handle)
        except json.JSONDecodeError as exc:
            raise ValueError(f"School dataset '{json_path}' is not valid JSON: {exc}") from exc

    if not isinstance(payload, list):
        raise ValueError(f"School dataset '{json_path}' must contain a JSON array.")

    schools = tuple(parse_school(row) for row in payload)
    validate_schools(schools)
    logger.info(f"Loaded {len(schools)} schools from {json_path.name}")
    return schools
