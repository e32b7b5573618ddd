"""Input classification — the runtime type gate for unknown values.

Every evaluation starts by turning an arbitrary object into a
:class:`Candidate`. Only ``InputKind.STRING`` candidates reach rule logic.
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from enum import StrEnum


class InputKind(StrEnum):
    """Classification of a value handed to a validator."""

    STRING = "string"
    NULL = "null"
    ABSENT = "absent"
    OTHER = "other"


class _Missing:
    """Sentinel type for "no value was passed at all"."""

    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING = _Missing()


@dataclass(frozen=True)
class Candidate:
    """A classified input value."""

    kind: InputKind
    type_name: str  # name used in type-gate messages
    text: str | None = None  # set only for InputKind.STRING


def runtime_type_name(value: object) -> str:
    """Name the runtime type of *value* for type-gate messages.

    Examples:
        >>> runtime_type_name(42)
        'number'
        >>> runtime_type_name(True)
        'boolean'
        >>> runtime_type_name([1, 2])
        'list'
    """
    if value is None:
        return "null"
    if value is MISSING:
        return "undefined"
    if isinstance(value, str):
        return "string"
    # bool is a numbers.Number subclass, so it must be checked first
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, numbers.Number):
        return "number"
    if callable(value):
        return "function"
    return type(value).__name__


def classify(value: object = MISSING) -> Candidate:
    """Classify *value* as string, null, absent, or other."""
    if value is MISSING:
        return Candidate(kind=InputKind.ABSENT, type_name="undefined")
    if value is None:
        return Candidate(kind=InputKind.NULL, type_name="null")
    if isinstance(value, str):
        return Candidate(kind=InputKind.STRING, type_name="string", text=value)
    return Candidate(kind=InputKind.OTHER, type_name=runtime_type_name(value))
