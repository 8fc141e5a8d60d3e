"""Application search – GridData page container."""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any


@dataclass
class GridData:
    """One page of grid rows plus the total number of matching rows."""
    rows: list[dict[str, Any]] = field(default_factory=list)
    total: int = 0
    page_index: int = 0
    page_size: int | None = None

    @property
    def total_pages(self) -> int:
        if not self.page_size or self.total <= 0:
            return 1 if self.total > 0 else 0
        return math.ceil(self.total / self.page_size)

    @property
    def has_next(self) -> bool:
        return self.page_index + 1 < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.page_index > 0


__all__ = ["GridData"]
