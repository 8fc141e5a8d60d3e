"""Kernel – errors, scope and policy primitives shared by every layer."""
from shop_grid.kernel.scope import ScopeContext

__all__ = ["ScopeContext"]
