"""Validators — fluent builders that evaluate unknown values into Results."""

from fluentval.validators.base import BaseValidator
from fluentval.validators.string import StringValidator

__all__ = ["BaseValidator", "StringValidator"]
