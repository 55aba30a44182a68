"""Rich Console factory and theme for prflow output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

PRFLOW_THEME = Theme(
    {
        "prflow.ok": "bold green",
        "prflow.error": "bold red",
        "prflow.warning": "bold yellow",
        "prflow.op": "bold cyan",
        "prflow.key": "dim",
        "prflow.kind.git": "green",
        "prflow.kind.open_pr": "bold magenta",
        "prflow.kind.verify_remote_empty": "yellow",
        "prflow.label": "bold",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=PRFLOW_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_kind(kind: str) -> str:
    """Return the Rich style name for a step kind."""
    style = f"prflow.kind.{kind}"
    return style if style in PRFLOW_THEME.styles else ""
