"""Infrastructure errors – datastore failures."""

from __future__ import annotations

from typing import Any

from shop_grid.kernel.errors.base import GridError


class DatastoreError(GridError):
    """The datastore failed while executing a grid query.

    Covers timeouts, constraint violations and lost connections alike; the
    driver exception is kept as ``cause`` / ``__cause__``.
    """

    default_code = "datastore_error"
    status_code = 503

    def __init__(
        self,
        operation: str,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"Datastore failure during '{operation}'", **kwargs)
        self.operation = operation


__all__ = ["DatastoreError"]
