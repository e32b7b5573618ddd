"""FvCommand — click command with an eager ``--examples`` flag.

``--examples`` prints the command's usage examples and exits, so
``--help`` stays short.
"""

from __future__ import annotations

from typing import Any

import click


class FvCommand(click.Command):
    """Command accepting ``examples=`` text shown by ``--examples``."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    expose_value=False,
                    is_eager=True,
                    callback=self._show_examples,
                    help="Show usage examples.",
                )
            )

    def _show_examples(self, ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if value:
            click.echo(f"Examples for '{ctx.command_path}':\n\n{self.examples}")
            ctx.exit(0)
