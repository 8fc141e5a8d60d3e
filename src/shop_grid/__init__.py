"""
shop_grid – Filterable, sortable, paginated admin grid queries.

Import path convention::

    from shop_grid.application.search import SearchCriteria, Sorting, Pagination
    from shop_grid.kernel.scope import ScopeContext
    from shop_grid.adapters.sqlalchemy import EmployeeQueryComposer, GridDataProvider
    from shop_grid.kernel.errors import InvalidFilterFieldError
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
