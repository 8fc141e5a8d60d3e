"""Multi-shop scope of a grid request."""

from __future__ import annotations

import dataclasses
from typing import Iterable


@dataclasses.dataclass(frozen=True)
class ScopeContext:
    """Shops the caller may see and the language used for joined labels.

    ``allowed_shop_ids`` is normalised to a sorted tuple of distinct ints so
    that two equal scopes always bind the same parameter list.
    """

    allowed_shop_ids: tuple[int, ...]
    lang_id: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "allowed_shop_ids", _normalise_ids(self.allowed_shop_ids))
        object.__setattr__(self, "lang_id", int(self.lang_id))

    @classmethod
    def single_shop(cls, shop_id: int, lang_id: int) -> "ScopeContext":
        return cls(allowed_shop_ids=(shop_id,), lang_id=lang_id)

    def allows(self, shop_id: int) -> bool:
        return shop_id in self.allowed_shop_ids


def _normalise_ids(ids: Iterable[int]) -> tuple[int, ...]:
    return tuple(sorted({int(i) for i in ids}))


__all__ = ["ScopeContext"]
