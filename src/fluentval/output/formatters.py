"""Rich/JSON output helpers.

The CLI renders a validation Result for humans (Rich styling) or
machines (--json). Quiet mode prints the bare value or message.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.text import Text

from fluentval.output.console import render_line

if TYPE_CHECKING:
    from fluentval.domain.result import Result


def format_result(
    result: Result[str],
    *,
    json_output: bool = False,
    quiet: bool = False,
) -> str:
    """Format a validation Result for display.

    Args:
        result: The result to format.
        json_output: Return JSON (takes precedence over *quiet*).
        quiet: Return only the value or the failure message.
    """
    if json_output:
        return result.model_dump_json(indent=2)
    body = result.value if result.ok else result.message
    if quiet:
        return body
    if result.ok:
        return render_line(Text("OK", style="fv.ok"), Text(f"  {body}", style="fv.value"))
    return render_line(Text("ERROR", style="fv.error"), Text(f"  {body}", style="fv.message"))
