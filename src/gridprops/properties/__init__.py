"""SubModule for per-cell property storage."""

from gridprops.properties.grid_property import GridProperty

__all__ = ["GridProperty"]
