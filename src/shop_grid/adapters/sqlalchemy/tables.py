"""SQLAlchemy adapter – Core table definitions for the built-in grids.

Every table name carries the install's ``table_prefix`` (``ps_employee``,
``shop2_employee``, ...).  Definitions are idempotent per ``MetaData``: asking
twice for the same prefixed table returns the already registered one.
"""
from __future__ import annotations

from typing import NamedTuple

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    Integer,
    MetaData,
    Numeric,
    String,
    Table,
)


class EmployeeTables(NamedTuple):
    employee: Table
    employee_shop: Table
    profile_lang: Table


class ProductTables(NamedTuple):
    product: Table
    product_shop: Table
    product_lang: Table


def _table(metadata: MetaData, name: str, *columns: Column) -> Table:
    existing = metadata.tables.get(name)
    if existing is not None:
        return existing
    return Table(name, metadata, *columns)


def employee_tables(metadata: MetaData, prefix: str = "") -> EmployeeTables:
    """Register (or fetch) the employee grid tables on *metadata*."""
    return EmployeeTables(
        employee=_table(
            metadata,
            f"{prefix}employee",
            Column("id_employee", Integer, primary_key=True, autoincrement=True),
            Column("id_profile", Integer, nullable=False, index=True),
            Column("firstname", String(255), nullable=False),
            Column("lastname", String(255), nullable=False),
            Column("email", String(255), nullable=False),
            Column("active", Boolean, nullable=False, default=False),
        ),
        employee_shop=_table(
            metadata,
            f"{prefix}employee_shop",
            Column("id_employee", Integer, primary_key=True),
            Column("id_shop", Integer, primary_key=True, index=True),
        ),
        profile_lang=_table(
            metadata,
            f"{prefix}profile_lang",
            Column("id_profile", Integer, primary_key=True),
            Column("id_lang", Integer, primary_key=True),
            Column("name", String(128), nullable=False),
        ),
    )


def product_tables(metadata: MetaData, prefix: str = "") -> ProductTables:
    """Register (or fetch) the product grid tables on *metadata*."""
    return ProductTables(
        product=_table(
            metadata,
            f"{prefix}product",
            Column("id_product", Integer, primary_key=True, autoincrement=True),
            Column("reference", String(64), nullable=False, default=""),
            Column("price", Numeric(20, 6), nullable=False, default=0),
            Column("quantity", Integer, nullable=False, default=0),
            Column("active", Boolean, nullable=False, default=False),
            Column("date_add", DateTime, nullable=False),
        ),
        product_shop=_table(
            metadata,
            f"{prefix}product_shop",
            Column("id_product", Integer, primary_key=True),
            Column("id_shop", Integer, primary_key=True, index=True),
        ),
        product_lang=_table(
            metadata,
            f"{prefix}product_lang",
            Column("id_product", Integer, primary_key=True),
            Column("id_lang", Integer, primary_key=True),
            Column("name", String(128), nullable=False),
        ),
    )


__all__ = ["EmployeeTables", "ProductTables", "employee_tables", "product_tables"]
