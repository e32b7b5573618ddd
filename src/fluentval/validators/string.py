"""StringValidator — fluent rule builder and evaluator for strings.

Configuration calls mutate the validator and return it, so calls chain::

    validator = StringValidator().not_empty().max_length(20).not_equals("foo")
    result = validator.go(value)

INVARIANT: At most one rule per :class:`RuleKind`. Adding a rule removes
any rule of the same kind and appends the new one (filter-then-append),
so a replaced rule moves to the end of the evaluation order.

Configuration calls store their arguments as given (``model_construct``):
nothing is validated or coerced, so ``min_length(2.5)`` keeps ``2.5`` and
``equals(5)`` keeps ``5``. Only initial rules are validated (see
:func:`~fluentval.domain.rules.parse_rule`).
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from fluentval.domain.inputs import MISSING, InputKind, classify
from fluentval.domain.result import Failure, Result, Success
from fluentval.domain.rules import (
    EqualRule,
    MaxLengthRule,
    MinLengthRule,
    NotEqualRule,
    parse_rule,
)
from fluentval.validators.base import BaseValidator

logger = logging.getLogger(__name__)

AnyRule = EqualRule | NotEqualRule | MinLengthRule | MaxLengthRule


class StringValidator(BaseValidator[str]):
    """Validator accepting only ``str`` values that satisfy every rule.

    Args:
        rules: Optional initial rules (rule models or mappings such as
            ``{"kind": "min_length", "min": 3}``). Anything other than a
            list or tuple is treated as no rules.
    """

    def __init__(self, rules: Iterable[Any] | None = None) -> None:
        self._rules: tuple[AnyRule, ...] = ()
        if isinstance(rules, (list, tuple)):
            for rule in rules:
                self._rules = self._add_rule(parse_rule(rule))

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        return f"StringValidator(rules={list(self._rules)!r})"

    @property
    def rules(self) -> tuple[AnyRule, ...]:
        """Configured rules in evaluation order."""
        return self._rules

    def _add_rule(self, rule: AnyRule) -> tuple[AnyRule, ...]:
        """Return the rule set with *rule* replacing any rule of its kind."""
        filtered = tuple(r for r in self._rules if r.kind != rule.kind)
        if len(filtered) != len(self._rules):
            logger.debug("Replacing %s rule", rule.kind)
        return (*filtered, rule)

    # --- Configuration ---

    def equals(self, value: str) -> StringValidator:
        """Fail if the candidate is not equal to *value*."""
        self._rules = self._add_rule(EqualRule.model_construct(value=value))
        return self

    def not_equals(self, value: str) -> StringValidator:
        """Fail if the candidate is equal to *value*."""
        self._rules = self._add_rule(NotEqualRule.model_construct(value=value))
        return self

    def min_length(self, min: int | float) -> StringValidator:
        """Fail if the candidate is shorter than *min*."""
        self._rules = self._add_rule(MinLengthRule.model_construct(min=min))
        return self

    def max_length(self, max: int | float) -> StringValidator:
        """Fail if the candidate is longer than *max*."""
        self._rules = self._add_rule(MaxLengthRule.model_construct(max=max))
        return self

    def not_empty(self) -> StringValidator:
        """Fail if the candidate is the empty string.

        Shares the min-length slot: replaces any ``min_length`` rule.
        """
        return self.min_length(1)

    def empty(self) -> StringValidator:
        """Fail unless the candidate is the empty string.

        ``None`` and absent values are rejected by the type gate, not here.
        Shares the max-length slot: replaces any ``max_length`` rule.
        """
        return self.max_length(0)

    # --- Evaluation ---

    def check_rule(self, rule: AnyRule, value: str) -> Result[str]:
        """Check a single *rule* against a string *value*."""
        if isinstance(rule, EqualRule):
            if value != rule.value:
                return Failure(message=f"Value was expected to be {rule.value} but was {value}.")
        elif isinstance(rule, NotEqualRule):
            if value == rule.value:
                return Failure(message=f"Value must not be {rule.value}.")
        elif isinstance(rule, MinLengthRule):
            if len(value) < rule.min:
                return Failure(
                    message=(
                        f"String length must be greater than or equal to {rule.min} "
                        f"but was {len(value)}."
                    )
                )
        elif isinstance(rule, MaxLengthRule):
            if len(value) > rule.max:
                return Failure(
                    message=(
                        f"String length must be less than or equal to {rule.max} "
                        f"but was {len(value)}."
                    )
                )
        return Success(value=value)

    def go(self, value: object = MISSING) -> Result[str]:
        """Evaluate *value* against the configured rules.

        Non-strings fail at the type gate before any rule runs. Otherwise
        the first failing rule decides the message; later rules are skipped.
        """
        candidate = classify(value)
        if candidate.kind is not InputKind.STRING:
            return Failure(
                message=f"StringValidator expected a string but received {candidate.type_name}."
            )

        text = candidate.text
        assert text is not None
        for rule in self._rules:
            result = self.check_rule(rule, text)
            if not result.ok:
                logger.debug("Rule %s rejected value", rule.kind)
                return result

        return Success(value=text)
