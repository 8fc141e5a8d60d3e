"""Application grid – GridDefinition, FilterField, FilterKind.

A grid definition is the explicit allow-list of what callers may filter and
sort on.  Composers consult it before building any SQL, so an unknown key is
rejected rather than ignored.
"""
from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Any, Iterable, Mapping

from shop_grid.application.search.criteria import SortDirection, Sorting
from shop_grid.kernel.errors import InvalidFilterFieldError, InvalidSortFieldError


class FilterKind(str, Enum):
    EXACT = "exact"
    TEXT = "text"
    RANGE = "range"


@dataclasses.dataclass(frozen=True)
class FilterField:
    name: str
    kind: FilterKind = FilterKind.EXACT


@dataclasses.dataclass(frozen=True)
class GridDefinition:
    """Filterable and sortable fields of one grid.

    Attributes:
        name: Grid identifier, used in logs and errors.
        primary_key: Field used as default order and as sort tie-break.
        filters: Allowed filter fields with their kind.
        sortable: Allowed sort fields (columns or derived aliases).
    """

    name: str
    primary_key: str
    filters: tuple[FilterField, ...] = ()
    sortable: frozenset[str] = frozenset()

    def __post_init__(self) -> None:
        object.__setattr__(self, "filters", tuple(self.filters))
        object.__setattr__(self, "sortable", frozenset(self.sortable))
        names = [f.name for f in self.filters]
        if len(names) != len(set(names)):
            raise ValueError(f"Grid '{self.name}' declares a filter field twice")

    @property
    def filter_names(self) -> frozenset[str]:
        return frozenset(f.name for f in self.filters)

    def filter_field(self, name: str) -> FilterField:
        for f in self.filters:
            if f.name == name:
                return f
        raise InvalidFilterFieldError(name, self.filter_names)

    def check_filters(self, filters: Mapping[str, Any]) -> None:
        """Raise on the first unknown key (keys are checked in sorted order)."""
        for name in sorted(filters):
            self.filter_field(name)

    def check_sorting(self, sorting: Sorting) -> SortDirection:
        """Validate *sorting* and return its normalised direction."""
        if sorting.field not in self.sortable:
            raise InvalidSortFieldError(sorting.field, self.sortable)
        direction = sorting.direction
        if isinstance(direction, SortDirection):
            return direction
        try:
            return SortDirection(str(direction).lower())
        except ValueError:
            raise InvalidSortFieldError(
                sorting.field, self.sortable, direction=str(direction)
            ) from None


def define_grid(
    name: str,
    primary_key: str,
    *,
    exact: Iterable[str] = (),
    text: Iterable[str] = (),
    ranges: Iterable[str] = (),
    sortable: Iterable[str] = (),
) -> GridDefinition:
    """Shorthand for declaring a grid from per-kind field lists."""
    filters = (
        [FilterField(n, FilterKind.EXACT) for n in exact]
        + [FilterField(n, FilterKind.TEXT) for n in text]
        + [FilterField(n, FilterKind.RANGE) for n in ranges]
    )
    return GridDefinition(
        name=name,
        primary_key=primary_key,
        filters=tuple(filters),
        sortable=frozenset(sortable),
    )


__all__ = ["FilterField", "FilterKind", "GridDefinition", "define_grid"]
