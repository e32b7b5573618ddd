"""BaseValidator — abstract contract shared by all validators.

A validator accepts any object and answers with a :data:`Result`.
Implementations must never raise for a rejected value.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Generic, TypeVar

from fluentval.domain.inputs import MISSING

if TYPE_CHECKING:
    from fluentval.domain.result import Result

T = TypeVar("T")


class BaseValidator(ABC, Generic[T]):
    """Abstract base for validators producing ``Result[T]``.

    Usage::

        class StringValidator(BaseValidator[str]):
            def go(self, value: object = MISSING) -> Result[str]:
                ...
    """

    @abstractmethod
    def go(self, value: object = MISSING) -> Result[T]:
        """Evaluate *value* and return Success or Failure."""
        ...

    def validate(self, value: object = MISSING) -> Result[T]:
        """Alias for :meth:`go`."""
        return self.go(value)
