"""String rule models.

Four rule kinds, each an immutable value object keyed by ``kind``:
- equal / not_equal: compare the candidate against a fixed string.
- min_length / max_length: bound the candidate's length (inclusive).

``not_empty`` and ``empty`` are not kinds of their own; they expand to
``MinLengthRule(min=1)`` and ``MaxLengthRule(max=0)``.

INVARIANT: Rules carry data only. Checking lives in the validator.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field, TypeAdapter


class RuleKind(StrEnum):
    """The closed set of string rule kinds."""

    EQUAL = "equal"
    NOT_EQUAL = "not_equal"
    MIN_LENGTH = "min_length"
    MAX_LENGTH = "max_length"


class EqualRule(BaseModel):
    """Candidate must equal *value*."""

    model_config = {"frozen": True}

    kind: Literal["equal"] = "equal"
    value: str


class NotEqualRule(BaseModel):
    """Candidate must differ from *value*."""

    model_config = {"frozen": True}

    kind: Literal["not_equal"] = "not_equal"
    value: str


class MinLengthRule(BaseModel):
    """Candidate length must be at least *min*."""

    model_config = {"frozen": True}

    kind: Literal["min_length"] = "min_length"
    min: int | float


class MaxLengthRule(BaseModel):
    """Candidate length must be at most *max*."""

    model_config = {"frozen": True}

    kind: Literal["max_length"] = "max_length"
    max: int | float


Rule = Annotated[
    EqualRule | NotEqualRule | MinLengthRule | MaxLengthRule,
    Field(discriminator="kind"),
]

_RULE_ADAPTER: TypeAdapter[Any] = TypeAdapter(Rule)


def parse_rule(data: Any) -> EqualRule | NotEqualRule | MinLengthRule | MaxLengthRule:
    """Validate a rule model or a plain mapping into a rule model.

    Examples:
        >>> parse_rule({"kind": "min_length", "min": 3})
        MinLengthRule(kind='min_length', min=3)

    Raises:
        pydantic.ValidationError: If *data* does not describe a known rule.
    """
    if isinstance(data, (EqualRule, NotEqualRule, MinLengthRule, MaxLengthRule)):
        return data
    return _RULE_ADAPTER.validate_python(data)
