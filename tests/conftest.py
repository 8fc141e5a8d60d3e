"""Shared fixtures: seeded in-memory SQLite databases for the built-in grids."""

from __future__ import annotations

import datetime
from decimal import Decimal
from typing import Any, Callable

import pytest
from sqlalchemy import create_engine
from sqlalchemy.engine import Connection, Engine

from shop_grid.adapters.sqlalchemy import EmployeeQueryComposer, ProductQueryComposer
from shop_grid.kernel.scope import ScopeContext
from shop_grid.testing import seed_employees, seed_products, seed_profiles

SHOP_A, SHOP_B = 1, 2
LANG_EN, LANG_FR = 1, 2

# 3 employees in shop A, 2 in shop B.
EMPLOYEES: list[dict[str, Any]] = [
    {"id_employee": 1, "id_profile": 1, "firstname": "Ada", "lastname": "Lovelace",
     "email": "ada@shop.test", "active": True, "shops": [SHOP_A]},
    {"id_employee": 2, "id_profile": 1, "firstname": "Grace", "lastname": "Hopper",
     "email": "grace@shop.test", "active": True, "shops": [SHOP_B]},
    {"id_employee": 3, "id_profile": 2, "firstname": "Alan", "lastname": "Turing",
     "email": "alan@shop.test", "active": False, "shops": [SHOP_A]},
    {"id_employee": 4, "id_profile": 2, "firstname": "Edsger", "lastname": "Dijkstra",
     "email": "edsger@shop.test", "active": True, "shops": [SHOP_B]},
    {"id_employee": 5, "id_profile": 3, "firstname": "Barbara", "lastname": "Liskov",
     "email": "barbara@shop.test", "active": True, "shops": [SHOP_A]},
]

PROFILES = {
    (1, LANG_EN): "Administrator",
    (1, LANG_FR): "Administrateur",
    (2, LANG_EN): "Logistician",
    (2, LANG_FR): "Logisticien",
    (3, LANG_EN): "Translator",
}

PRODUCTS: list[dict[str, Any]] = [
    {"id_product": 1, "reference": "demo_1", "price": Decimal("23.90"), "quantity": 10, "active": True,
     "date_add": datetime.datetime(2024, 1, 10, 9, 0), "shops": [SHOP_A],
     "names": {LANG_EN: "Hummingbird T-shirt", LANG_FR: "T-shirt colibri"}},
    {"id_product": 2, "reference": "demo_2", "price": Decimal("35.90"), "quantity": 0, "active": True,
     "date_add": datetime.datetime(2024, 2, 15, 14, 30), "shops": [SHOP_A, SHOP_B],
     "names": {LANG_EN: "Hummingbird sweater"}},
    {"id_product": 3, "reference": "demo_3", "price": Decimal("29.00"), "quantity": 5, "active": False,
     "date_add": datetime.datetime(2024, 3, 1, 8, 0), "shops": [SHOP_A],
     "names": {LANG_EN: "Mountain fox poster"}},
    {"id_product": 4, "reference": "demo_4", "price": Decimal("9.00"), "quantity": 100, "active": True,
     "date_add": datetime.datetime(2024, 3, 20, 17, 45), "shops": [SHOP_B],
     "names": {LANG_EN: "Mug The best is yet to come"}},
    {"id_product": 5, "reference": "50%_off", "price": Decimal("12.00"), "quantity": 3, "active": True,
     "date_add": datetime.datetime(2024, 4, 5, 11, 15), "shops": [SHOP_A],
     "names": {LANG_EN: "Sale mug"}},
]


class QueryRunner:
    """Executes composed statements on a synchronous engine."""

    def __init__(self, engine: Engine) -> None:
        self.engine = engine

    def rows(self, stmt: Any) -> list[dict[str, Any]]:
        with self.engine.connect() as conn:
            return [dict(r) for r in conn.execute(stmt).mappings()]

    def column(self, stmt: Any, name: str) -> list[Any]:
        return [r[name] for r in self.rows(stmt)]

    def scalar(self, stmt: Any) -> Any:
        with self.engine.connect() as conn:
            return conn.execute(stmt).scalar_one()


@pytest.fixture
def scope_a() -> ScopeContext:
    return ScopeContext(allowed_shop_ids=(SHOP_A,), lang_id=LANG_EN)


@pytest.fixture
def employee_composer() -> EmployeeQueryComposer:
    return EmployeeQueryComposer(table_prefix="ps_")


@pytest.fixture
def product_composer() -> ProductQueryComposer:
    return ProductQueryComposer(table_prefix="ps_")


@pytest.fixture
def seed_employee_grid(employee_composer: EmployeeQueryComposer) -> Callable[[Connection], None]:
    """Seeder for the employee grid tables; pass it to ``run_sync`` from async tests."""

    def seed(conn: Connection) -> None:
        seed_employees(conn, employee_composer.tables, EMPLOYEES)
        seed_profiles(conn, employee_composer.tables, PROFILES)

    return seed


@pytest.fixture
def employee_db(employee_composer: EmployeeQueryComposer, seed_employee_grid):
    engine = create_engine("sqlite://")
    employee_composer.metadata.create_all(engine)
    with engine.begin() as conn:
        seed_employee_grid(conn)
    yield QueryRunner(engine)
    engine.dispose()


@pytest.fixture
def product_db(product_composer: ProductQueryComposer):
    engine = create_engine("sqlite://")
    product_composer.metadata.create_all(engine)
    with engine.begin() as conn:
        seed_products(conn, product_composer.tables, PRODUCTS)
    yield QueryRunner(engine)
    engine.dispose()
