"""Route group exports."""

from . import advisor, browse, filters, health, map_view, schools, session, stats

__all__ = ["advisor", "browse", "filters", "health", "map_view", "schools", "session", "stats"]
