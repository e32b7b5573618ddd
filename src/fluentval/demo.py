"""Sample caller — runs values through a preconfigured validator.

Mirrors the library's reference usage::

    validator = StringValidator().not_empty().max_length(20).not_equals("foo")

and reports each outcome on the console.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from fluentval.config.models import DemoConfig
from fluentval.validators.string import StringValidator

if TYPE_CHECKING:
    from fluentval.domain.result import Result

DEFAULT_VALUES: tuple[str, ...] = ("foo", "bar", "something longer than 20")


def default_validator(config: DemoConfig | None = None) -> StringValidator:
    """Build the sample validator from the ``[demo]`` config section."""
    config = config or DemoConfig()
    validator = StringValidator()
    if config.not_empty:
        validator.not_empty()
    if config.max_length is not None:
        validator.max_length(config.max_length)
    if config.forbidden is not None:
        validator.not_equals(config.forbidden)
    return validator


def run_demo(value: object, validator: StringValidator | None = None) -> Result[str]:
    """Validate *value*, echoing the value or the failure message.

    Success goes to stdout, failure to stderr. The result is returned so
    callers can decide on exit codes.
    """
    if validator is None:
        validator = default_validator()
    result = validator.go(value)
    if result.ok:
        click.echo(f"String value is valid: {result.value}.")
    else:
        click.echo(result.message, err=True)
    return result
