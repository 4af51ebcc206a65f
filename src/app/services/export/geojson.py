"""GeoJSON export of school markers."""

from __future__ import annotations

from typing import Any, Dict, List, Sequence

from ...models.domain import School, SchoolType

MARKER_COLORS: dict[SchoolType, str] = {
    SchoolType.GOVERNMENT: "#22c55e",
    SchoolType.PRIVATE: "#f59e0b",
    SchoolType.KINDERGARTEN: "#3b82f6",
}
DEFAULT_MARKER_COLOR = "#3b82f6"


def marker_color(category: SchoolType) -> str:
    return MARKER_COLORS.get(category, DEFAULT_MARKER_COLOR)


def has_valid_coordinates(school: School) -> bool:
    coordinates = school.coordinates
    if coordinates is None:
        return False
    return -90.0 <= coordinates.lat <= 90.0 and -180.0 <= coordinates.lng <= 180.0


def school_to_feature(school: School) -> Dict[str, Any]:
    """Point feature for one school. GeoJSON uses [lng, lat] order."""

    return {
        "type": "Feature",
        "id": school.id,
        "geometry": {
            "type": "Point",
            "coordinates": [school.coordinates.lng, school.coordinates.lat],
        },
        "properties": {
            "id": school.id,
            "name": school.name,
            "wilayat": school.wilayat.value,
            "type": school.category.value,
            "markerColor": marker_color(school.category),
        },
    }


def export_schools_to_geojson(schools: Sequence[School]) -> Dict[str, Any]:
    """FeatureCollection of every school with usable coordinates; others are skipped."""

    features: List[Dict[str, Any]] = [
        school_to_feature(school) for school in schools if has_valid_coordinates(school)
    ]
    return {"type": "FeatureCollection", "features": features}
