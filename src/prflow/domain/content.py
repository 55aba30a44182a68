"""Demo file content: README sections and feature marker files.

Every written file is stamped with the current time in the bracketed
``[YYYY-MM-DD HH:MM:SS]`` format.
"""

from __future__ import annotations

import re
from datetime import datetime

TIMESTAMP_FORMAT = "[%Y-%m-%d %H:%M:%S]"
TIMESTAMP_PATTERN = re.compile(r"\[\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}\]")

README_FILENAME = "README.md"


def stamp(now: datetime | None = None) -> str:
    """Return the bracketed timestamp for *now* (default: current time)."""
    return (now or datetime.now()).strftime(TIMESTAMP_FORMAT)


def readme_header(title: str, now: datetime | None = None) -> str:
    return f"# {title}\n\n{stamp(now)} Repository created.\n"


def readme_section(branch: str, now: datetime | None = None) -> str:
    """Section appended to the shared README by a feature branch."""
    return f"\n## {branch}\n\n{stamp(now)} Changes from {branch}.\n"


def marker_content(branch: str, now: datetime | None = None) -> str:
    return f"# {branch}\n\n{stamp(now)}\n"
