"""SQLAlchemy adapter – grid query composers, engine factory, data provider."""
from shop_grid.adapters.sqlalchemy.composer import QueryComposer
from shop_grid.adapters.sqlalchemy.employee import EMPLOYEE_GRID, EmployeeQueryComposer
from shop_grid.adapters.sqlalchemy.engine import SqlAlchemyEngineFactory
from shop_grid.adapters.sqlalchemy.product import PRODUCT_GRID, ProductQueryComposer
from shop_grid.adapters.sqlalchemy.provider import GridDataProvider
from shop_grid.adapters.sqlalchemy.tables import (
    EmployeeTables,
    ProductTables,
    employee_tables,
    product_tables,
)

__all__ = [
    "EMPLOYEE_GRID",
    "EmployeeQueryComposer",
    "EmployeeTables",
    "GridDataProvider",
    "PRODUCT_GRID",
    "ProductQueryComposer",
    "ProductTables",
    "QueryComposer",
    "SqlAlchemyEngineFactory",
    "employee_tables",
    "product_tables",
]
