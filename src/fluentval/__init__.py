"""fluentval — fluent validation for string values.

Build a validator by chaining rules, then evaluate any value::

    from fluentval import StringValidator

    result = StringValidator().not_empty().max_length(20).go(value)
    if result.ok:
        ...
"""

from fluentval.domain.inputs import MISSING, Candidate, InputKind, classify
from fluentval.domain.result import Failure, Result, Success
from fluentval.domain.rules import (
    EqualRule,
    MaxLengthRule,
    MinLengthRule,
    NotEqualRule,
    Rule,
    RuleKind,
    parse_rule,
)
from fluentval.validators import BaseValidator, StringValidator

__version__ = "0.1.0"

__all__ = [
    "MISSING",
    "BaseValidator",
    "Candidate",
    "EqualRule",
    "Failure",
    "InputKind",
    "MaxLengthRule",
    "MinLengthRule",
    "NotEqualRule",
    "Result",
    "Rule",
    "RuleKind",
    "StringValidator",
    "Success",
    "__version__",
    "classify",
    "parse_rule",
]
