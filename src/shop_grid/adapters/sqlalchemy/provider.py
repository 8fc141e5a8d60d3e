"""SQLAlchemy adapter – GridDataProvider.

Runs the list and count queries of one composer on a single connection and
assembles the page a grid controller renders.
"""
from __future__ import annotations

from typing import Any

from sqlalchemy.exc import SQLAlchemyError

from shop_grid.adapters.sqlalchemy.composer import QueryComposer
from shop_grid.application.search.criteria import SearchCriteria
from shop_grid.application.search.result import GridData
from shop_grid.kernel.errors import DatastoreError
from shop_grid.kernel.scope import ScopeContext
from shop_grid.observability.logging import get_logger


class GridDataProvider:
    """Fetch one :class:`GridData` page.

    Parameters
    ----------
    engine:
        An :class:`~sqlalchemy.ext.asyncio.AsyncEngine` or
        :class:`~shop_grid.adapters.sqlalchemy.engine.SqlAlchemyEngineFactory`;
        anything whose ``connect()`` is an async context manager.
    composer:
        The grid's :class:`QueryComposer`.
    """

    def __init__(self, engine: Any, composer: QueryComposer) -> None:
        self._engine = engine
        self._composer = composer
        self._log = get_logger(__name__, grid=composer.definition.name)

    async def get_data(self, criteria: SearchCriteria, scope: ScopeContext) -> GridData:
        """Build both queries, then execute them on one connection.

        Criteria errors are raised before a connection is acquired.  Driver
        failures surface as :class:`DatastoreError`; no partial page is
        returned.
        """
        list_query = self._composer.build_list_query(criteria, scope)
        count_query = self._composer.build_count_query(criteria, scope)

        try:
            async with self._engine.connect() as conn:
                result = await conn.execute(list_query)
                rows = [dict(row) for row in result.mappings()]
                total = (await conn.execute(count_query)).scalar_one()
        except (SQLAlchemyError, OSError) as exc:
            self._log.error("grid_datastore_error", error=repr(exc))
            raise DatastoreError(
                f"{self._composer.definition.name}.get_data", cause=exc
            ) from exc

        pagination = criteria.pagination
        self._log.debug("grid_data_fetched", total=total, rows=len(rows))
        return GridData(
            rows=rows,
            total=total,
            page_index=pagination.page_index if pagination is not None else 0,
            page_size=pagination.page_size if pagination is not None else None,
        )


__all__ = ["GridDataProvider"]
