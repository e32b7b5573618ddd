"""Standalone command: validate one value against rules given as flags."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from fluentval.commands._base import FvCommand

if TYPE_CHECKING:
    from fluentval.commands._context import AppContext

_CHECK_EXAMPLES = """\
  fluentval check "bar" --not-empty --max-length 20 --not-equals foo
  fluentval check "" --empty
  fluentval --json check "hello" --equals hello"""


@click.command(cls=FvCommand, examples=_CHECK_EXAMPLES)
@click.argument("value")
@click.option("--equals", "equals", default=None, help="Value must equal this string.")
@click.option("--not-equals", "not_equals", default=None, help="Value must differ from this.")
@click.option("--min-length", type=int, default=None, help="Minimum length (inclusive).")
@click.option("--max-length", type=int, default=None, help="Maximum length (inclusive).")
@click.option("--not-empty", is_flag=True, help="Reject the empty string.")
@click.option("--empty", is_flag=True, help="Accept only the empty string.")
@click.pass_obj
def check(
    app: AppContext,
    value: str,
    equals: str | None,
    not_equals: str | None,
    min_length: int | None,
    max_length: int | None,
    not_empty: bool,
    empty: bool,
) -> None:
    """Validate VALUE against the given string rules.

    Rules are applied in option order; --not-empty overrides --min-length
    and --empty overrides --max-length.
    """
    from fluentval.validators.string import StringValidator

    validator = StringValidator()
    if equals is not None:
        validator.equals(equals)
    if not_equals is not None:
        validator.not_equals(not_equals)
    if min_length is not None:
        validator.min_length(min_length)
    if max_length is not None:
        validator.max_length(max_length)
    if not_empty:
        validator.not_empty()
    if empty:
        validator.empty()
    app.emit(validator.go(value))
