"""Application forms – state-dependent validation group selection."""
from shop_grid.application.forms.price_impact import (
    FIXED_PRICE_GROUP,
    REDUCTION_GROUP,
    PriceImpactValidator,
    disabled_fields,
    is_using_fixed_price,
    select_validation_groups,
)

__all__ = [
    "FIXED_PRICE_GROUP",
    "PriceImpactValidator",
    "REDUCTION_GROUP",
    "disabled_fields",
    "is_using_fixed_price",
    "select_validation_groups",
]
