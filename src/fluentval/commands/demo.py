"""Standalone command: run the sample validator over a few values."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from fluentval.commands._base import FvCommand

if TYPE_CHECKING:
    from fluentval.commands._context import AppContext

_DEMO_EXAMPLES = """\
  fluentval demo
  fluentval demo "bar" "foo"
  fluentval -c fluentval.toml demo hello"""


@click.command(cls=FvCommand, examples=_DEMO_EXAMPLES)
@click.argument("values", nargs=-1)
@click.pass_obj
def demo(app: AppContext, values: tuple[str, ...]) -> None:
    """Run VALUES through the sample validator (from the [demo] config).

    Prints one line per value, or one formatted result per value with
    --json / --quiet. Exits with code 1 if any value is rejected.
    """
    from fluentval.demo import DEFAULT_VALUES, default_validator, run_demo

    validator = default_validator(app.settings.demo)
    results = []
    for value in values or DEFAULT_VALUES:
        if app.machine_output:
            result = validator.go(value)
            app.echo(result)
        else:
            result = run_demo(value, validator)
        results.append(result)
    if not all(result.ok for result in results):
        raise SystemExit(1)
