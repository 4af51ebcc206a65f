"""Export services."""

from .geojson import export_schools_to_geojson, marker_color
from .tabular import schools_to_csv, schools_to_xlsx

__all__ = [
    "export_schools_to_geojson",
    "marker_color",
    "schools_to_csv",
    "schools_to_xlsx",
]
