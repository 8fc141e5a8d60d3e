"""Config – GridSettings."""
from __future__ import annotations

import dataclasses
import logging
import re
from typing import ClassVar

from shop_grid.config.settings.base import Settings
from shop_grid.config.validation import InvalidSettingValueError

# Table names cannot be bound parameters, so the prefix is restricted to identifier characters.
_TABLE_PREFIX = re.compile(r"^[A-Za-z0-9_]*$")


@dataclasses.dataclass
class GridSettings(Settings):
    """Settings for grid composers and their datastore (``GRID_*`` variables)."""

    _prefix: ClassVar[str] = "GRID"

    database_url: str
    table_prefix: str = "ps_"
    max_page_size: int = 1000
    log_level: str = "INFO"

    def _validate(self) -> None:
        if not _TABLE_PREFIX.match(self.table_prefix):
            raise InvalidSettingValueError(
                "table_prefix", self.table_prefix, "only letters, digits and '_' are allowed"
            )
        if self.max_page_size <= 0:
            raise InvalidSettingValueError("max_page_size", self.max_page_size, "must be greater than 0")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise InvalidSettingValueError("log_level", self.log_level, "unknown logging level")


__all__ = ["GridSettings"]
