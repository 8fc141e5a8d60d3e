"""Application – grid search building blocks (framework-agnostic)."""

from shop_grid.application.grid import FilterField, FilterKind, GridDefinition, define_grid
from shop_grid.application.search import (
    GridData,
    Pagination,
    RangeFilter,
    SearchCriteria,
    SortDirection,
    Sorting,
)

__all__ = [
    "FilterField",
    "FilterKind",
    "GridData",
    "GridDefinition",
    "Pagination",
    "RangeFilter",
    "SearchCriteria",
    "SortDirection",
    "Sorting",
    "define_grid",
]
