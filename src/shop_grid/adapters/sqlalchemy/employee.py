"""SQLAlchemy adapter – employee grid."""
from __future__ import annotations

from typing import Any, Mapping

from sqlalchemy import and_
from sqlalchemy.sql.elements import BindParameter, ColumnElement
from sqlalchemy.sql.selectable import FromClause

from shop_grid.adapters.sqlalchemy.composer import QueryComposer
from shop_grid.adapters.sqlalchemy.tables import employee_tables
from shop_grid.application.grid.definition import define_grid

EMPLOYEE_GRID = define_grid(
    "employee",
    primary_key="id_employee",
    exact=("id_employee", "id_profile", "active"),
    text=("firstname", "lastname", "email", "profile_name"),
    sortable=("id_employee", "firstname", "lastname", "email", "active", "profile_name"),
)


class EmployeeQueryComposer(QueryComposer):
    """Employees visible in the current shops, with their localized profile name."""

    definition = EMPLOYEE_GRID

    def _define_tables(self) -> None:
        self.tables = employee_tables(self.metadata, self.table_prefix)

    def _select_from(self, lang_id: BindParameter[int]) -> FromClause:
        e, pl = self.tables.employee, self.tables.profile_lang
        return e.outerjoin(pl, and_(e.c.id_profile == pl.c.id_profile, pl.c.id_lang == lang_id))

    def _membership(self) -> tuple[ColumnElement[Any], ColumnElement[Any]]:
        es = self.tables.employee_shop
        return es.c.id_employee, es.c.id_shop

    def _field_columns(self) -> Mapping[str, ColumnElement[Any]]:
        e, pl = self.tables.employee, self.tables.profile_lang
        return {
            "id_employee": e.c.id_employee,
            "id_profile": e.c.id_profile,
            "firstname": e.c.firstname,
            "lastname": e.c.lastname,
            "email": e.c.email,
            "active": e.c.active,
            "profile_name": pl.c.name,
        }

    def _projection(self) -> list[ColumnElement[Any]]:
        e, pl = self.tables.employee, self.tables.profile_lang
        return [*e.c, pl.c.name.label("profile_name")]


__all__ = ["EMPLOYEE_GRID", "EmployeeQueryComposer"]
