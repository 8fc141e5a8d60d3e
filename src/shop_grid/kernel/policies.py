"""Policy pattern – composable rules evaluated against submitted state.

A ``Policy`` encapsulates one rule over a typed context and returns a
``PolicyResult``.  Policies compose with ``AllOf`` and ``AnyOf``.

Example::

    class NotBlank(Policy[Mapping[str, Any]]):
        def evaluate(self, ctx: Mapping[str, Any]) -> PolicyResult:
            return PolicyResult(ctx.get("price") not in (None, ""), reason="required")

    result = AllOf(NotBlank(), PositiveOrZero()).evaluate(state)
    if not result:
        ...
"""

from __future__ import annotations

import abc
import dataclasses
from typing import Callable, Generic, TypeVar

TContext = TypeVar("TContext")


@dataclasses.dataclass(frozen=True)
class PolicyResult:
    """Outcome of a policy evaluation.

    Attributes:
        allowed: ``True`` when the rule holds.
        reason: Human-readable explanation, set on denial.
        field: Name of the form field the denial is attached to, if any.
    """

    allowed: bool
    reason: str | None = None
    field: str | None = None

    @classmethod
    def permit(cls) -> "PolicyResult":
        return cls(allowed=True)

    @classmethod
    def deny(cls, reason: str = "denied", *, field: str | None = None) -> "PolicyResult":
        return cls(allowed=False, reason=reason, field=field)

    def __bool__(self) -> bool:
        return self.allowed


class Policy(abc.ABC, Generic[TContext]):
    """Abstract rule evaluated against a typed context."""

    @abc.abstractmethod
    def evaluate(self, context: TContext) -> PolicyResult: ...


class AllOf(Policy[TContext]):
    """Conjunction: every policy must allow. Short-circuits on first denial."""

    def __init__(self, *policies: Policy[TContext]) -> None:
        if not policies:
            raise ValueError("AllOf requires at least one policy")
        self._policies = policies

    def evaluate(self, context: TContext) -> PolicyResult:
        for p in self._policies:
            result = p.evaluate(context)
            if not result.allowed:
                return result
        return PolicyResult.permit()


class AnyOf(Policy[TContext]):
    """Disjunction: at least one policy must allow. Short-circuits on first permit."""

    def __init__(self, *policies: Policy[TContext]) -> None:
        if not policies:
            raise ValueError("AnyOf requires at least one policy")
        self._policies = policies

    def evaluate(self, context: TContext) -> PolicyResult:
        last_denial = PolicyResult.deny("all policies denied")
        for p in self._policies:
            result = p.evaluate(context)
            if result.allowed:
                return result
            last_denial = result
        return last_denial


class When(Policy[TContext]):
    """Evaluates *policy* only when *condition* holds for the context."""

    def __init__(self, condition: Callable[[TContext], bool], policy: Policy[TContext]) -> None:
        self._condition = condition
        self._policy = policy

    def evaluate(self, context: TContext) -> PolicyResult:
        if not self._condition(context):
            return PolicyResult.permit()
        return self._policy.evaluate(context)


__all__ = [
    "AllOf",
    "AnyOf",
    "Policy",
    "PolicyResult",
    "When",
]
