"""SQLAlchemy adapter – SqlAlchemyEngineFactory."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine, create_async_engine

if TYPE_CHECKING:
    from shop_grid.config.grid import GridSettings


class SqlAlchemyEngineFactory:
    """Owns one async engine; hands out request-scoped connections.

    Usage::

        factory = SqlAlchemyEngineFactory("postgresql+asyncpg://...")
        async with factory.connect() as conn:
            ...
        await factory.dispose()
    """

    def __init__(self, database_url: str, **engine_kwargs: Any) -> None:
        self._engine: AsyncEngine = create_async_engine(database_url, **engine_kwargs)

    @classmethod
    def from_settings(cls, settings: "GridSettings", **engine_kwargs: Any) -> "SqlAlchemyEngineFactory":
        return cls(settings.database_url, **engine_kwargs)

    @property
    def engine(self) -> AsyncEngine:
        return self._engine

    def connect(self) -> AsyncConnection:
        """Connection usable as ``async with``; returned to the pool on exit."""
        return self._engine.connect()

    async def dispose(self) -> None:
        await self._engine.dispose()


__all__ = ["SqlAlchemyEngineFactory"]
