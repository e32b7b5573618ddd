"""Rich rendering of result lines to plain strings.

Output is captured in a StringIO buffer so formatters keep returning
``str``. Rich drops color codes when the buffer is not a terminal.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.text import Text
from rich.theme import Theme

FLUENTVAL_THEME = Theme(
    {
        "fv.ok": "bold green",
        "fv.error": "bold red",
        "fv.value": "bold",
        "fv.message": "red",
    }
)


def render_line(*parts: Text) -> str:
    """Render styled *parts* as one line, without the trailing newline."""
    buffer = StringIO()
    console = Console(file=buffer, theme=FLUENTVAL_THEME, highlight=False, width=120)
    console.print(*parts, sep="")
    return buffer.getvalue().rstrip("\n")
