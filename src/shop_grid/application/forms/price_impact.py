"""Specific-price impact form – validation groups and disabled fields.

The impact is either a fixed price or a reduction, never both.  Which one
applies is decided from the submitted state alone:

* ``select_validation_groups`` picks the constraint group to run,
* ``disabled_fields`` names the field the UI must grey out,
* ``PriceImpactValidator`` runs only the constraints of the selected group.

Example::

    state = {"disabling_switch_fixed_price_tax_excluded": True,
             "fixed_price_tax_excluded": "12.50"}
    select_validation_groups(state)   # frozenset({"fixed_price_group"})
    disabled_fields(state)            # frozenset({"reduction"})
    PriceImpactValidator().validate(state)
"""
from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any, Mapping

from shop_grid.kernel.errors import GridValidationError
from shop_grid.kernel.policies import AllOf, AnyOf, Policy, PolicyResult, When

FIXED_PRICE_GROUP = "fixed_price_group"
REDUCTION_GROUP = "reduction_group"

FIXED_PRICE_FIELD = "fixed_price_tax_excluded"
FIXED_PRICE_SWITCH = "disabling_switch_fixed_price_tax_excluded"
REDUCTION_FIELD = "reduction"

# A fixed price equal to this sentinel means "keep the product's initial price".
INITIAL_PRICE_VALUE = Decimal("-1")
MAX_REDUCTION_PERCENTAGE = Decimal("100")

State = Mapping[str, Any]


def _to_decimal(value: Any) -> Decimal | None:
    if isinstance(value, bool):
        return None
    try:
        number = Decimal(str(value))
    except (InvalidOperation, ValueError):
        return None
    return number if number.is_finite() else None


def is_using_fixed_price(state: State | None) -> bool:
    """Whether the submitted impact sets a fixed price.

    The switch checkbox wins when submitted.  Otherwise a present
    ``fixed_price_tax_excluded`` counts unless it holds the initial-price
    sentinel; ``None`` is read as ``0``.
    """
    if not state:
        return False
    if FIXED_PRICE_SWITCH in state:
        return state[FIXED_PRICE_SWITCH] is True
    if FIXED_PRICE_FIELD not in state:
        return False
    raw = state[FIXED_PRICE_FIELD]
    price = _to_decimal(0 if raw is None else raw)
    return price is None or price != INITIAL_PRICE_VALUE


def select_validation_groups(state: State | None) -> frozenset[str]:
    return frozenset({FIXED_PRICE_GROUP if is_using_fixed_price(state) else REDUCTION_GROUP})


def disabled_fields(state: State | None) -> frozenset[str]:
    if is_using_fixed_price(state):
        return frozenset({REDUCTION_FIELD})
    return frozenset({FIXED_PRICE_FIELD})


# ---------------------------------------------------------------------------
# Constraints
# ---------------------------------------------------------------------------


class NotBlank(Policy[State]):
    def __init__(self, field: str) -> None:
        self.field = field

    def evaluate(self, context: State) -> PolicyResult:
        value = context.get(self.field)
        if value is None or (isinstance(value, str) and not value.strip()):
            return PolicyResult.deny("This value should not be blank.", field=self.field)
        return PolicyResult.permit()


class IsNumber(Policy[State]):
    def __init__(self, field: str) -> None:
        self.field = field

    def evaluate(self, context: State) -> PolicyResult:
        if _to_decimal(context.get(self.field)) is None:
            return PolicyResult.deny("This value should be of type float.", field=self.field)
        return PolicyResult.permit()


class InRange(Policy[State]):
    """Numeric value within ``[minimum, maximum]``; either bound optional."""

    def __init__(
        self,
        field: str,
        message: str,
        *,
        minimum: Decimal | None = None,
        maximum: Decimal | None = None,
    ) -> None:
        self.field = field
        self.message = message
        self.minimum = minimum
        self.maximum = maximum

    def evaluate(self, context: State) -> PolicyResult:
        value = _to_decimal(context.get(self.field))
        if value is None:
            return PolicyResult.deny(self.message.replace("%value%", str(context.get(self.field))), field=self.field)
        if (self.minimum is not None and value < self.minimum) or (
            self.maximum is not None and value > self.maximum
        ):
            return PolicyResult.deny(self.message.replace("%value%", str(value)), field=self.field)
        return PolicyResult.permit()


class FieldEquals(Policy[State]):
    def __init__(self, field: str, expected: Any) -> None:
        self.field = field
        self.expected = expected

    def evaluate(self, context: State) -> PolicyResult:
        if context.get(self.field) == self.expected:
            return PolicyResult.permit()
        return PolicyResult.deny(f"{self.field} is not {self.expected!r}", field=self.field)


class Nested(Policy[State]):
    """Evaluates *policy* against the sub-mapping stored under *field*."""

    def __init__(self, field: str, policy: Policy[State]) -> None:
        self.field = field
        self.policy = policy

    def evaluate(self, context: State) -> PolicyResult:
        sub = context.get(self.field)
        if not isinstance(sub, Mapping):
            return PolicyResult.deny("This value should be a reduction.", field=self.field)
        result = self.policy.evaluate(sub)
        if result.allowed:
            return result
        return PolicyResult.deny(result.reason or "invalid", field=f"{self.field}.{result.field}")


_REDUCTION = AllOf(
    AnyOf(
        FieldEquals("type", "amount"),
        FieldEquals("type", "percentage"),
    ),
    When(
        lambda r: r.get("type") == "percentage",
        InRange(
            "value",
            f'Reduction value "%value%" is invalid. Allowed values from 0 to {MAX_REDUCTION_PERCENTAGE}%',
            minimum=Decimal("0"),
            maximum=MAX_REDUCTION_PERCENTAGE,
        ),
    ),
    When(
        lambda r: r.get("type") == "amount",
        InRange(
            "value",
            'Reduction value "%value%" is invalid. Value cannot be negative',
            minimum=Decimal("0"),
        ),
    ),
)

GROUP_CONSTRAINTS: dict[str, tuple[Policy[State], ...]] = {
    FIXED_PRICE_GROUP: (
        AllOf(
            NotBlank(FIXED_PRICE_FIELD),
            IsNumber(FIXED_PRICE_FIELD),
            InRange(
                FIXED_PRICE_FIELD,
                "This value should be either positive or zero.",
                minimum=Decimal("0"),
            ),
        ),
    ),
    REDUCTION_GROUP: (Nested(REDUCTION_FIELD, _REDUCTION),),
}


class PriceImpactValidator:
    """Validate a price impact submission against its selected group only."""

    def __init__(self, constraints: Mapping[str, tuple[Policy[State], ...]] | None = None) -> None:
        self._constraints = constraints if constraints is not None else GROUP_CONSTRAINTS

    def violations(self, state: State) -> list[dict[str, Any]]:
        errors: list[dict[str, Any]] = []
        for group in sorted(select_validation_groups(state)):
            for policy in self._constraints.get(group, ()):
                result = policy.evaluate(state)
                if not result.allowed:
                    errors.append({"field": result.field, "message": result.reason, "group": group})
        return errors

    def validate(self, state: State) -> None:
        errors = self.violations(state)
        if errors:
            raise GridValidationError("Invalid price impact", errors=errors)


__all__ = [
    "FIXED_PRICE_GROUP",
    "GROUP_CONSTRAINTS",
    "INITIAL_PRICE_VALUE",
    "PriceImpactValidator",
    "REDUCTION_GROUP",
    "disabled_fields",
    "is_using_fixed_price",
    "select_validation_groups",
]
