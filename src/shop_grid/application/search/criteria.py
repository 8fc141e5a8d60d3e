"""Application search – SearchCriteria, Sorting, Pagination, RangeFilter."""
from __future__ import annotations

import dataclasses
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


@dataclasses.dataclass(frozen=True)
class Sorting:
    """Single sort criterion. ``direction`` may be a ``SortDirection`` or a raw string."""
    field: str
    direction: SortDirection | str = SortDirection.ASC


@dataclasses.dataclass(frozen=True)
class Pagination:
    """Offset pagination with a 0-based page index.

    Values are not range-checked here; the composer rejects them with
    :class:`~shop_grid.kernel.errors.InvalidPaginationError` so the error
    surfaces from the query builder.
    """
    page_index: int = 0
    page_size: int = 50

    @property
    def offset(self) -> int:
        return self.page_index * self.page_size

    @property
    def limit(self) -> int:
        return self.page_size


@dataclasses.dataclass(frozen=True)
class RangeFilter:
    """Inclusive range; either bound may be ``None``."""
    lower: Any = None
    upper: Any = None

    @property
    def is_empty(self) -> bool:
        return _is_blank(self.lower) and _is_blank(self.upper)


@dataclasses.dataclass(frozen=True)
class SearchCriteria:
    """Per-request grid search: filters, optional sorting, optional pagination."""
    filters: Mapping[str, Any] = dataclasses.field(default_factory=dict)
    sorting: Sorting | None = None
    pagination: Pagination | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "filters", MappingProxyType(dict(self.filters)))

    def without_pagination(self) -> "SearchCriteria":
        return dataclasses.replace(self, pagination=None)

    def with_page(self, page_index: int) -> "SearchCriteria":
        size = self.pagination.page_size if self.pagination is not None else Pagination().page_size
        return dataclasses.replace(self, pagination=Pagination(page_index=page_index, page_size=size))


def _is_blank(value: Any) -> bool:
    return value is None or value == ""


__all__ = ["Pagination", "RangeFilter", "SearchCriteria", "SortDirection", "Sorting"]
