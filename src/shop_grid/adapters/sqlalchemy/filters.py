"""SQLAlchemy adapter – translate one filter value into a bound predicate."""
from __future__ import annotations

from typing import Any, Mapping

from sqlalchemy import and_
from sqlalchemy.sql.elements import ColumnElement

from shop_grid.application.grid.definition import FilterField, FilterKind
from shop_grid.application.search.criteria import RangeFilter
from shop_grid.kernel.errors import InvalidFilterValueError

_RANGE_KEYS = frozenset({"from", "to"})
_COLLECTIONS = (list, tuple, set, frozenset)


def _is_blank(value: Any) -> bool:
    return value is None or value == ""


def as_range(field: str, value: Any) -> RangeFilter:
    """Coerce a ``RangeFilter`` or ``{"from": .., "to": ..}`` mapping."""
    if isinstance(value, RangeFilter):
        return value
    if isinstance(value, Mapping):
        unknown = set(value) - _RANGE_KEYS
        if unknown:
            raise InvalidFilterValueError(
                field, value, f"unexpected range keys {sorted(unknown)}"
            )
        return RangeFilter(lower=value.get("from"), upper=value.get("to"))
    raise InvalidFilterValueError(field, value, "range filter expects 'from'/'to' bounds")


def build_predicate(
    field: FilterField, column: ColumnElement[Any], value: Any
) -> ColumnElement[bool] | None:
    """Return the WHERE predicate for *value*, or ``None`` when it filters nothing.

    Every value is bound as a parameter; list values on exact filters use an
    expanding ``IN`` parameter.
    """
    if _is_blank(value):
        return None

    if field.kind is FilterKind.RANGE:
        rng = as_range(field.name, value)
        clauses = []
        if not _is_blank(rng.lower):
            clauses.append(column >= rng.lower)
        if not _is_blank(rng.upper):
            clauses.append(column <= rng.upper)
        if not clauses:
            return None
        return and_(*clauses)

    if isinstance(value, (Mapping, RangeFilter)):
        raise InvalidFilterValueError(field.name, value, f"{field.kind.value} filter expects a scalar")

    if field.kind is FilterKind.TEXT:
        if isinstance(value, _COLLECTIONS):
            raise InvalidFilterValueError(field.name, value, "text filter expects a single string")
        return column.icontains(str(value), autoescape=True)

    if isinstance(value, _COLLECTIONS):
        values = list(value)
        if not values:
            return None
        return column.in_(values)
    return column == value


__all__ = ["as_range", "build_predicate"]
