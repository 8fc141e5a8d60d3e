"""Caller-input errors – rejected search criteria and form state.

All of these map to a "bad request" response and are never retried.
"""

from __future__ import annotations

from typing import Any, Iterable

from shop_grid.kernel.errors.base import GridError


class GridValidationError(GridError):
    """Input does not meet validation rules.

    ``errors`` is a list of field-level failures (``{"field": ..., "message": ...}``).
    """

    default_code = "validation_error"
    status_code = 400

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = errors or []

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["errors"] = self.errors
        return base


class InvalidSortFieldError(GridValidationError):
    """Sort field (or direction) is not in the grid's allow-list."""

    default_code = "invalid_sort_field"

    def __init__(
        self,
        field: str,
        allowed: Iterable[str] = (),
        *,
        direction: str | None = None,
        **kwargs: Any,
    ) -> None:
        allowed = sorted(allowed)
        detail: dict[str, Any] = {"field": field, "allowed": allowed}
        message = f"Cannot sort by '{field}'"
        if direction is not None:
            detail["direction"] = direction
            message = f"Cannot sort '{field}' in direction '{direction}'"
        super().__init__(message, detail=detail, **kwargs)
        self.field = field
        self.allowed = allowed
        self.direction = direction


class InvalidFilterFieldError(GridValidationError):
    """Filter key is not in the grid's allow-list."""

    default_code = "invalid_filter_field"

    def __init__(self, field: str, allowed: Iterable[str] = (), **kwargs: Any) -> None:
        allowed = sorted(allowed)
        super().__init__(
            f"Cannot filter by '{field}'",
            detail={"field": field, "allowed": allowed},
            **kwargs,
        )
        self.field = field
        self.allowed = allowed


class InvalidFilterValueError(GridValidationError):
    """Filter key is known but its value has the wrong shape for the filter kind."""

    default_code = "invalid_filter_value"

    def __init__(self, field: str, value: Any, reason: str, **kwargs: Any) -> None:
        super().__init__(
            f"Invalid value for filter '{field}': {reason}",
            detail={"field": field, "reason": reason},
            **kwargs,
        )
        self.field = field
        self.value = value
        self.reason = reason


class InvalidPaginationError(GridValidationError):
    """Page index or page size is out of range."""

    default_code = "invalid_pagination"

    def __init__(self, page_index: int, page_size: int, reason: str, **kwargs: Any) -> None:
        super().__init__(
            f"Invalid pagination (page_index={page_index}, page_size={page_size}): {reason}",
            detail={"page_index": page_index, "page_size": page_size, "reason": reason},
            **kwargs,
        )
        self.page_index = page_index
        self.page_size = page_size
        self.reason = reason


__all__ = [
    "GridValidationError",
    "InvalidFilterFieldError",
    "InvalidFilterValueError",
    "InvalidPaginationError",
    "InvalidSortFieldError",
]
