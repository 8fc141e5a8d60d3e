"""SQLAlchemy adapter – QueryComposer.

A composer turns one :class:`SearchCriteria` into two SQLAlchemy selects:
the page query and the count query.  Both start from the same
``_filtered_query`` (FROM clause, joins, scope restriction and filters), so
they always qualify the same rows; only projection, ordering and
pagination differ.

``Select`` is generative: every ``where`` / ``order_by`` / ``limit`` returns
a new statement, so nothing built here is shared between calls.

Subclasses declare their :class:`GridDefinition` and the table wiring::

    class EmployeeQueryComposer(QueryComposer):
        definition = EMPLOYEE_GRID

        def _select_from(self, lang_id): ...
        def _membership(self): ...
        def _field_columns(self): ...
        def _projection(self): ...
"""
from __future__ import annotations

import abc
from typing import TYPE_CHECKING, Any, ClassVar, Mapping

from sqlalchemy import Integer, MetaData, bindparam, func, select
from sqlalchemy.sql import Select
from sqlalchemy.sql.elements import BindParameter, ColumnElement
from sqlalchemy.sql.selectable import FromClause

from shop_grid.adapters.sqlalchemy.filters import build_predicate
from shop_grid.application.grid.definition import GridDefinition
from shop_grid.application.search.criteria import Pagination, SearchCriteria, SortDirection, Sorting
from shop_grid.kernel.errors import GridValidationError, InvalidPaginationError
from shop_grid.kernel.scope import ScopeContext
from shop_grid.observability.logging import get_logger

if TYPE_CHECKING:
    from shop_grid.config.grid import GridSettings


class QueryComposer(abc.ABC):
    """Builds list and count queries for one grid.

    Args:
        metadata: ``MetaData`` the grid tables are registered on.  A fresh one
            is created when omitted.
        table_prefix: Prepended to every table name.
        max_page_size: Upper bound for ``Pagination.page_size``; ``None``
            disables the check.
    """

    definition: ClassVar[GridDefinition]

    def __init__(
        self,
        metadata: MetaData | None = None,
        *,
        table_prefix: str = "",
        max_page_size: int | None = None,
    ) -> None:
        self.metadata = metadata if metadata is not None else MetaData()
        self.table_prefix = table_prefix
        self.max_page_size = max_page_size
        self._define_tables()
        self._log = get_logger(__name__, grid=self.definition.name)

        declared = self.definition.filter_names | self.definition.sortable | {self.definition.primary_key}
        missing = declared - set(self._field_columns())
        if missing:
            raise ValueError(
                f"Grid '{self.definition.name}' has no column for fields {sorted(missing)}"
            )

    @classmethod
    def from_settings(cls, settings: "GridSettings", metadata: MetaData | None = None) -> "QueryComposer":
        return cls(metadata, table_prefix=settings.table_prefix, max_page_size=settings.max_page_size)

    # ------------------------------------------------------------------
    # Grid wiring
    # ------------------------------------------------------------------

    @abc.abstractmethod
    def _define_tables(self) -> None:
        """Register the grid's tables on ``self.metadata``."""

    @abc.abstractmethod
    def _select_from(self, lang_id: BindParameter[int]) -> FromClause:
        """Main table plus lookup joins; localized joins match on *lang_id*."""

    @abc.abstractmethod
    def _membership(self) -> tuple[ColumnElement[Any], ColumnElement[Any]]:
        """``(entity foreign key, shop id)`` columns of the scope-membership table."""

    @abc.abstractmethod
    def _field_columns(self) -> Mapping[str, ColumnElement[Any]]:
        """Grid field name -> column expression used to filter and sort it."""

    @abc.abstractmethod
    def _projection(self) -> list[ColumnElement[Any]]:
        """Columns of the list query."""

    @property
    def primary_key(self) -> ColumnElement[Any]:
        return self._field_columns()[self.definition.primary_key]

    # ------------------------------------------------------------------
    # Public contract
    # ------------------------------------------------------------------

    def build_list_query(self, criteria: SearchCriteria, scope: ScopeContext) -> Select[Any]:
        """Page query: projection, scope, filters, sorting and pagination."""
        try:
            query = self._filtered_query(criteria, scope)
            query = query.with_only_columns(*self._projection())
            query = self.apply_sorting(query, criteria.sorting)
            if criteria.pagination is not None:
                query = self.apply_pagination(query, criteria.pagination)
        except GridValidationError as exc:
            self._log.warning("grid_query_rejected", query="list", code=exc.code)
            raise
        return query

    def build_count_query(self, criteria: SearchCriteria, scope: ScopeContext) -> Select[Any]:
        """Count query over the same rows as :meth:`build_list_query`; sorting and pagination are ignored."""
        try:
            query = self._filtered_query(criteria, scope)
        except GridValidationError as exc:
            self._log.warning("grid_query_rejected", query="count", code=exc.code)
            raise
        return query.with_only_columns(func.count(self.primary_key))

    # ------------------------------------------------------------------
    # Steps
    # ------------------------------------------------------------------

    def _filtered_query(self, criteria: SearchCriteria, scope: ScopeContext) -> Select[Any]:
        self.definition.check_filters(criteria.filters)
        lang_id = bindparam("context_lang_id", value=scope.lang_id, type_=Integer)
        query = select(self.primary_key).select_from(self._select_from(lang_id))
        query = self.apply_base_scope(query, scope)
        return self.apply_filters(query, criteria.filters)

    def apply_base_scope(self, query: Select[Any], scope: ScopeContext) -> Select[Any]:
        """Keep rows linked to at least one allowed shop.

        A correlated ``EXISTS`` rather than a join: an entity attached to
        several allowed shops still yields one row.
        """
        shop_ids = bindparam(
            "context_shop_ids",
            value=list(scope.allowed_shop_ids),
            type_=Integer,
            expanding=True,
        )
        foreign_key, shop_id = self._membership()
        membership = (
            select(foreign_key)
            .where(foreign_key == self.primary_key)
            .where(shop_id.in_(shop_ids))
        )
        return query.where(membership.exists())

    def apply_filters(self, query: Select[Any], filters: Mapping[str, Any]) -> Select[Any]:
        columns = self._field_columns()
        for name in sorted(filters):
            field = self.definition.filter_field(name)
            predicate = build_predicate(field, columns[name], filters[name])
            if predicate is not None:
                query = query.where(predicate)
        return query

    def apply_sorting(self, query: Select[Any], sorting: Sorting | None) -> Select[Any]:
        """Order by the requested field, then by primary key so ties stay stable across pages."""
        pk = self.primary_key
        if sorting is None:
            return query.order_by(pk.asc())
        direction = self.definition.check_sorting(sorting)
        column = self._field_columns()[sorting.field]
        ordered = column.desc() if direction is SortDirection.DESC else column.asc()
        if sorting.field == self.definition.primary_key:
            return query.order_by(ordered)
        return query.order_by(ordered, pk.asc())

    def apply_pagination(self, query: Select[Any], pagination: Pagination) -> Select[Any]:
        page_index, page_size = pagination.page_index, pagination.page_size
        if page_size <= 0:
            raise InvalidPaginationError(page_index, page_size, "page_size must be greater than 0")
        if page_index < 0:
            raise InvalidPaginationError(page_index, page_size, "page_index must not be negative")
        if self.max_page_size is not None and page_size > self.max_page_size:
            raise InvalidPaginationError(
                page_index, page_size, f"page_size must not exceed {self.max_page_size}"
            )
        return query.offset(pagination.offset).limit(pagination.limit)


__all__ = ["QueryComposer"]
