"""Subcommand modules for fluentval.

Provides register_commands() which uses deferred imports to keep
``fluentval --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from fluentval.commands.check import check
    from fluentval.commands.demo import demo

    cli.add_command(check)
    cli.add_command(demo)
