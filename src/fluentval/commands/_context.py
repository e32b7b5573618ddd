"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Centralizes result emission (stdout/stderr
routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from fluentval.output.formatters import format_result

if TYPE_CHECKING:
    from fluentval.config.settings import FluentvalSettings
    from fluentval.domain.result import Result


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: FluentvalSettings) -> None:
        self.settings = settings

        from fluentval.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def machine_output(self) -> bool:
        """True when ``--json`` or ``--quiet`` replaces the default text."""
        return self.settings.json_output or self.settings.quiet

    def echo(self, result: Result[str]) -> None:
        """Format a Result to stdout (success) or stderr (failure)."""
        output = format_result(
            result,
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
        )
        click.echo(output, err=not result.ok)

    def emit(self, result: Result[str]) -> None:
        """Output a Result with correct exit semantics.

        * Success: writes to stdout, returns normally.
        * Failure: writes to stderr, exits with code 1.
        """
        self.echo(result)
        if not result.ok:
            raise SystemExit(1)
