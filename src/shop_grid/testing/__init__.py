"""Testing support – Hypothesis strategies and table seeding.

Requires the ``testing`` extra (``pip install "shop-grid[testing]"``).
"""

from shop_grid.testing.seed import seed_employees, seed_products, seed_profiles
from shop_grid.testing.strategies import (
    filters_strategy,
    pagination_strategy,
    search_criteria_strategy,
    sorting_strategy,
)

__all__ = [
    "filters_strategy",
    "pagination_strategy",
    "search_criteria_strategy",
    "seed_employees",
    "seed_products",
    "seed_profiles",
    "sorting_strategy",
]
