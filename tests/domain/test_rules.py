"""Tests for rule models and rule parsing."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from fluentval.domain.rules import (
    EqualRule,
    MaxLengthRule,
    MinLengthRule,
    NotEqualRule,
    RuleKind,
    parse_rule,
)


class TestRuleModels:
    @pytest.mark.parametrize(
        ("rule", "kind"),
        [
            (EqualRule(value="a"), RuleKind.EQUAL),
            (NotEqualRule(value="a"), RuleKind.NOT_EQUAL),
            (MinLengthRule(min=1), RuleKind.MIN_LENGTH),
            (MaxLengthRule(max=1), RuleKind.MAX_LENGTH),
        ],
    )
    def test_kind_tag(self, rule: object, kind: RuleKind) -> None:
        assert rule.kind == kind  # type: ignore[attr-defined]

    def test_frozen(self) -> None:
        rule = MinLengthRule(min=3)
        with pytest.raises(ValidationError):
            rule.min = 4  # type: ignore[misc]

    def test_value_equality(self) -> None:
        assert EqualRule(value="x") == EqualRule(value="x")
        assert EqualRule(value="x") != EqualRule(value="y")

    def test_negative_bounds_accepted(self) -> None:
        assert MinLengthRule(min=-5).min == -5
        assert MaxLengthRule(max=-1).max == -1

    def test_rule_kinds_are_closed(self) -> None:
        assert {k.value for k in RuleKind} == {
            "equal",
            "not_equal",
            "min_length",
            "max_length",
        }


class TestParseRule:
    def test_passes_models_through(self) -> None:
        rule = NotEqualRule(value="foo")
        assert parse_rule(rule) is rule

    def test_from_mapping(self) -> None:
        assert parse_rule({"kind": "min_length", "min": 3}) == MinLengthRule(min=3)
        assert parse_rule({"kind": "equal", "value": "x"}) == EqualRule(value="x")

    def test_bounds_keep_numeric_type(self) -> None:
        assert parse_rule({"kind": "min_length", "min": 2.5}).min == 2.5
        bound = parse_rule({"kind": "max_length", "max": 3}).max
        assert bound == 3
        assert isinstance(bound, int)

    def test_unknown_kind_rejected(self) -> None:
        with pytest.raises(ValidationError):
            parse_rule({"kind": "regex", "pattern": ".*"})

    def test_missing_parameter_rejected(self) -> None:
        with pytest.raises(ValidationError):
            parse_rule({"kind": "max_length"})
