"""Result[T] — the success/failure union returned by every validator.

INVARIANT: Validation outcomes are data, never exceptions.
Both variants are frozen and built fresh for each evaluation.
"""

from __future__ import annotations

from typing import Generic, Literal, TypeVar, Union

from pydantic import BaseModel

T = TypeVar("T")


class Success(BaseModel, Generic[T]):
    """The candidate passed every rule.

    Attributes:
        ok: Always True.
        value: The original, now type-confirmed, value.
    """

    model_config = {"frozen": True}

    ok: Literal[True] = True
    value: T


class Failure(BaseModel):
    """The candidate was rejected.

    Attributes:
        ok: Always False.
        message: Human-readable reason for the rejection.
    """

    model_config = {"frozen": True}

    ok: Literal[False] = False
    message: str


Result = Union[Success[T], Failure]
