"""Unit tests for the specific-price impact form rules."""

from __future__ import annotations

import pytest

from shop_grid.application.forms import (
    FIXED_PRICE_GROUP,
    REDUCTION_GROUP,
    PriceImpactValidator,
    disabled_fields,
    is_using_fixed_price,
    select_validation_groups,
)
from shop_grid.kernel.errors import GridValidationError

SWITCH = "disabling_switch_fixed_price_tax_excluded"
PRICE = "fixed_price_tax_excluded"


class TestGroupSelection:
    @pytest.mark.parametrize(
        "state, fixed",
        [
            (None, False),
            ({}, False),
            ({SWITCH: True, PRICE: "-1"}, True),  # switch wins over the sentinel
            ({SWITCH: False, PRICE: "12"}, False),  # switch wins over a real price
            ({SWITCH: "1", PRICE: "12"}, False),  # only a literal True enables it
            ({PRICE: "12.5"}, True),
            ({PRICE: "-1"}, False),
            ({PRICE: -1}, False),
            ({PRICE: None}, True),  # read as 0
            ({"reduction": {"type": "amount", "value": 3}}, False),
        ],
    )
    def test_is_using_fixed_price(self, state, fixed: bool) -> None:
        assert is_using_fixed_price(state) is fixed

    def test_fixed_price_selects_fixed_group(self) -> None:
        state = {SWITCH: True, PRICE: "12"}
        assert select_validation_groups(state) == {FIXED_PRICE_GROUP}
        assert disabled_fields(state) == {"reduction"}

    def test_reduction_selects_reduction_group(self) -> None:
        state = {PRICE: "-1", "reduction": {"type": "percentage", "value": 10}}
        assert select_validation_groups(state) == {REDUCTION_GROUP}
        assert disabled_fields(state) == {PRICE}

    def test_exactly_one_group(self) -> None:
        for state in ({}, {PRICE: "3"}, {SWITCH: False}):
            assert len(select_validation_groups(state)) == 1


class TestPriceImpactValidator:
    def test_valid_fixed_price(self) -> None:
        PriceImpactValidator().validate({SWITCH: True, PRICE: "0"})

    def test_negative_fixed_price(self) -> None:
        errors = PriceImpactValidator().violations({SWITCH: True, PRICE: "-5"})
        assert errors == [
            {
                "field": PRICE,
                "message": "This value should be either positive or zero.",
                "group": FIXED_PRICE_GROUP,
            }
        ]

    def test_blank_fixed_price(self) -> None:
        errors = PriceImpactValidator().violations({SWITCH: True, PRICE: ""})
        assert errors[0]["message"] == "This value should not be blank."

    def test_non_numeric_fixed_price(self) -> None:
        errors = PriceImpactValidator().violations({SWITCH: True, PRICE: "abc"})
        assert errors[0]["message"] == "This value should be of type float."

    def test_reduction_group_ignores_fixed_price_rules(self) -> None:
        state = {PRICE: "-1", "reduction": {"type": "amount", "value": "4.5"}}
        assert PriceImpactValidator().violations(state) == []

    def test_fixed_price_group_ignores_reduction_rules(self) -> None:
        state = {SWITCH: True, PRICE: "10", "reduction": {"type": "percentage", "value": 500}}
        assert PriceImpactValidator().violations(state) == []

    @pytest.mark.parametrize("value", [0, 50, "100"])
    def test_percentage_in_range(self, value) -> None:
        PriceImpactValidator().validate({"reduction": {"type": "percentage", "value": value}})

    def test_percentage_above_hundred(self) -> None:
        errors = PriceImpactValidator().violations({"reduction": {"type": "percentage", "value": 150}})
        assert errors[0]["field"] == "reduction.value"
        assert errors[0]["message"] == 'Reduction value "150" is invalid. Allowed values from 0 to 100%'
        assert errors[0]["group"] == REDUCTION_GROUP

    def test_negative_amount(self) -> None:
        errors = PriceImpactValidator().violations({"reduction": {"type": "amount", "value": -2}})
        assert errors[0]["message"] == 'Reduction value "-2" is invalid. Value cannot be negative'

    def test_amount_above_hundred_allowed(self) -> None:
        assert PriceImpactValidator().violations({"reduction": {"type": "amount", "value": 250}}) == []

    def test_unknown_reduction_type(self) -> None:
        errors = PriceImpactValidator().violations({"reduction": {"type": "gift", "value": 1}})
        assert errors[0]["field"] == "reduction.type"

    def test_missing_reduction(self) -> None:
        errors = PriceImpactValidator().violations({})
        assert errors[0]["field"] == "reduction"

    def test_validate_raises_with_errors(self) -> None:
        with pytest.raises(GridValidationError) as exc_info:
            PriceImpactValidator().validate({SWITCH: True, PRICE: "-3"})
        assert exc_info.value.errors[0]["group"] == FIXED_PRICE_GROUP
        assert exc_info.value.status_code == 400
