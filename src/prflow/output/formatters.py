"""Rich/JSON output helpers.

The CLI renders ServiceResult for humans (Rich output, colors) or machines
(--json). The formatter layer adapts ServiceResult to the requested mode.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from prflow.output.console import create_console, get_output, style_for_kind

if TYPE_CHECKING:
    from prflow.services.result import ServiceResult


def _format_data_human(data: dict[str, Any]) -> str:
    """Format result data as indented key-value pairs."""
    lines: list[str] = []
    for key, value in data.items():
        if isinstance(value, (dict, list)):
            lines.append(f"  {key}: {_json.dumps(value, separators=(',', ':'))}")
        else:
            lines.append(f"  {key}: {value}")
    return "\n".join(lines)


def format_plan(data: dict[str, Any], *, no_color: bool = False) -> str:
    """Render the ``plan`` payload as a numbered step table."""
    console = create_console(no_color=no_color)
    table = Table(title=f"Scenario for {data.get('repository', '')}", expand=False)
    table.add_column("#", justify="right", style="prflow.key", no_wrap=True)
    table.add_column("Kind", no_wrap=True)
    table.add_column("Step")
    table.add_column("Pause label", style="prflow.label")
    for index, step in enumerate(data.get("steps", []), start=1):
        kind = step["kind"]
        table.add_row(
            str(index),
            Text(kind, style=style_for_kind(kind)),
            Text(step["description"]),
            Text(step.get("label") or ""),
        )
    console.print(table)
    console.print(
        f"[prflow.key]tags:[/] {', '.join(data.get('tags', []))}  "
        f"[prflow.key]pull requests:[/] {data.get('pull_requests', 0)}"
    )
    return get_output(console).rstrip("\n")


def format_result(
    result: ServiceResult,
    *,
    json_output: bool = False,
    no_color: bool = False,
) -> str:
    """Format a ServiceResult for display.

    Args:
        result: The service result to format.
        json_output: If True, return JSON; otherwise return human-readable text.
        no_color: Disable ANSI codes in Rich-rendered output.
    """
    if json_output:
        return result.model_dump_json(indent=2)
    if result.ok:
        if result.op == "plan":
            return format_plan(result.data, no_color=no_color)
        parts = [f"OK: {result.op}"]
        if result.data:
            parts.append(_format_data_human(result.data))
        return "\n".join(parts)
    error_msg = result.error.message if result.error else "Unknown error"
    code = f" [{result.error.code}]" if result.error else ""
    return f"ERROR: {result.op}{code} - {error_msg}"
