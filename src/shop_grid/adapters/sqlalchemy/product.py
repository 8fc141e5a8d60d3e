"""SQLAlchemy adapter – product grid."""
from __future__ import annotations

from typing import Any, Mapping

from sqlalchemy import and_
from sqlalchemy.sql.elements import BindParameter, ColumnElement
from sqlalchemy.sql.selectable import FromClause

from shop_grid.adapters.sqlalchemy.composer import QueryComposer
from shop_grid.adapters.sqlalchemy.tables import product_tables
from shop_grid.application.grid.definition import define_grid

PRODUCT_GRID = define_grid(
    "product",
    primary_key="id_product",
    exact=("id_product", "active"),
    text=("reference", "name"),
    ranges=("price", "quantity", "date_add"),
    sortable=("id_product", "reference", "name", "price", "quantity", "active", "date_add"),
)


class ProductQueryComposer(QueryComposer):
    """Products sold in the current shops, named in the active language."""

    definition = PRODUCT_GRID

    def _define_tables(self) -> None:
        self.tables = product_tables(self.metadata, self.table_prefix)

    def _select_from(self, lang_id: BindParameter[int]) -> FromClause:
        p, pl = self.tables.product, self.tables.product_lang
        return p.outerjoin(pl, and_(p.c.id_product == pl.c.id_product, pl.c.id_lang == lang_id))

    def _membership(self) -> tuple[ColumnElement[Any], ColumnElement[Any]]:
        ps = self.tables.product_shop
        return ps.c.id_product, ps.c.id_shop

    def _field_columns(self) -> Mapping[str, ColumnElement[Any]]:
        p, pl = self.tables.product, self.tables.product_lang
        columns: dict[str, ColumnElement[Any]] = {name: p.c[name] for name in p.c.keys()}
        columns["name"] = pl.c.name
        return columns

    def _projection(self) -> list[ColumnElement[Any]]:
        p, pl = self.tables.product, self.tables.product_lang
        return [*p.c, pl.c.name.label("name")]


__all__ = ["PRODUCT_GRID", "ProductQueryComposer"]
