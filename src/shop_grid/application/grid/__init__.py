"""Application grid – per-grid filter and sort allow-lists."""
from shop_grid.application.grid.definition import FilterField, FilterKind, GridDefinition, define_grid

__all__ = ["FilterField", "FilterKind", "GridDefinition", "define_grid"]
