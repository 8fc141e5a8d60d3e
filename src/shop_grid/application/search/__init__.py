"""Application search – criteria and page result."""
from shop_grid.application.search.criteria import (
    Pagination,
    RangeFilter,
    SearchCriteria,
    SortDirection,
    Sorting,
)
from shop_grid.application.search.result import GridData

__all__ = [
    "GridData",
    "Pagination",
    "RangeFilter",
    "SearchCriteria",
    "SortDirection",
    "Sorting",
]
