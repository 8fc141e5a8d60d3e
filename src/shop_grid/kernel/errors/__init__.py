"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    GridError
    ├── GridValidationError      (validation.py, HTTP 400)
    │   ├── InvalidSortFieldError
    │   ├── InvalidFilterFieldError
    │   ├── InvalidFilterValueError
    │   └── InvalidPaginationError
    ├── DatastoreError           (infrastructure.py, HTTP 503)
    └── ConfigError              (shop_grid.config.validation)
"""

from shop_grid.kernel.errors.base import GridError
from shop_grid.kernel.errors.infrastructure import DatastoreError
from shop_grid.kernel.errors.validation import (
    GridValidationError,
    InvalidFilterFieldError,
    InvalidFilterValueError,
    InvalidPaginationError,
    InvalidSortFieldError,
)

__all__ = [
    "DatastoreError",
    "GridError",
    "GridValidationError",
    "InvalidFilterFieldError",
    "InvalidFilterValueError",
    "InvalidPaginationError",
    "InvalidSortFieldError",
]
