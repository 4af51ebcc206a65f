"""Projections consumed by the list, map and statistics screens."""

from __future__ import annotations

from typing import Optional, Sequence

from shapely.geometry import MultiPoint

from ..config import settings
from ..models.domain import FilterCriteria, School
from .catalogue import category_breakdown
from .export.geojson import export_schools_to_geojson, has_valid_coordinates

CHART_COLORS = ["#22c55e", "#f59e0b", "#3b82f6", "#ef4444"]


def cap(schools: Sequence[School], limit: Optional[int]) -> list[School]:
    """Display-only truncation."""

    if limit is None:
        return list(schools)
    return list(schools[: max(limit, 0)])


def marker_bounds(schools: Sequence[School]) -> Optional[dict]:
    """South-west / north-east corners around every plottable school."""

    points = [
        (school.coordinates.lng, school.coordinates.lat)
        for school in schools
        if has_valid_coordinates(school)
    ]
    if not points:
        return None
    min_lng, min_lat, max_lng, max_lat = MultiPoint(points).bounds
    return {"southWest": [min_lat, min_lng], "northEast": [max_lat, max_lng]}


def build_map_view(schools: Sequence[School], preview_limit: Optional[int] = None) -> dict:
    limit = settings.map_preview_limit if preview_limit is None else preview_limit
    bounds = marker_bounds(schools)
    return {
        "markers": export_schools_to_geojson(schools),
        "bounds": bounds,
        "center": None if bounds else list(settings.default_map_center),
        "zoom": None if bounds else settings.default_map_zoom,
        "preview": cap(schools, limit),
        "total": len(schools),
    }


def build_category_chart(schools: Sequence[School], criteria: FilterCriteria) -> list[dict]:
    counts = category_breakdown(schools, criteria)
    return [
        {"name": name, "value": value, "color": CHART_COLORS[index % len(CHART_COLORS)]}
        for index, (name, value) in enumerate(counts.items())
    ]
