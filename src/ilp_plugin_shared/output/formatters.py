"""Rich/JSON output helpers.

The CLI renders ServiceResult for humans (Rich markup) or machines
(--json). Quiet mode prints only the object payload as compact JSON so
normalized transfers can be piped onward.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.markup import escape

from ilp_plugin_shared.output.console import create_console, get_output

if TYPE_CHECKING:
    from ilp_plugin_shared.services.result import ServiceResult


def _format_value(value: Any) -> str:
    if isinstance(value, (dict, list)):
        return _json.dumps(value, separators=(",", ":"))
    return str(value)


def format_result(
    result: ServiceResult,
    *,
    json_output: bool = False,
    quiet: bool = False,
    no_color: bool = False,
) -> str:
    """Format a ServiceResult for display.

    Args:
        result: The service result to format.
        json_output: Return the full result as JSON.
        quiet: Return only the payload (or the error message).
        no_color: Disable ANSI escape codes.
    """
    if json_output:
        return result.model_dump_json(indent=2)
    if quiet:
        if result.ok:
            return _json.dumps(result.data, separators=(",", ":"))
        return result.error.message if result.error else "Unknown error"

    console = create_console(no_color=no_color)
    if result.ok:
        console.print(f"[ilp.ok]OK[/]: [ilp.op]{result.op}[/]", soft_wrap=True)
        for key, value in result.data.items():
            line = f"  [ilp.key]{escape(key)}[/]: {escape(_format_value(value))}"
            console.print(line, soft_wrap=True)
    else:
        error_msg = result.error.message if result.error else "Unknown error"
        line = f"[ilp.error]ERROR[/]: [ilp.op]{result.op}[/] - {escape(error_msg)}"
        console.print(line, soft_wrap=True)
    return get_output(console).rstrip("\n")
