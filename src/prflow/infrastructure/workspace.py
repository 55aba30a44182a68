"""Workspace files: reset at startup, README and feature markers."""

from __future__ import annotations

import logging
import shutil
from datetime import datetime
from pathlib import Path

from prflow.domain.branches import marker_filename
from prflow.domain.content import (
    README_FILENAME,
    marker_content,
    readme_header,
    readme_section,
)

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "PR flow demo"


class Workspace:
    """The directory the demo repository lives in."""

    def __init__(self, root: Path, title: str = DEFAULT_TITLE) -> None:
        self.root = root
        self.title = title

    @property
    def git_dir(self) -> Path:
        return self.root / ".git"

    @property
    def readme(self) -> Path:
        return self.root / README_FILENAME

    def has_repository(self) -> bool:
        return self.git_dir.exists()

    def reset(self) -> list[Path]:
        """Delete ``.git`` and every top-level markdown file.

        Returns the removed paths.
        """
        removed: list[Path] = []
        self.root.mkdir(parents=True, exist_ok=True)
        if self.git_dir.is_dir():
            shutil.rmtree(self.git_dir)
            removed.append(self.git_dir)
        elif self.git_dir.exists():
            self.git_dir.unlink()
            removed.append(self.git_dir)
        for path in sorted(self.root.glob("*.md")):
            path.unlink()
            removed.append(path)
        logger.debug("workspace reset, removed %d paths", len(removed))
        return removed

    def write_readme(self, now: datetime | None = None) -> Path:
        """Create or overwrite the README with a fresh header."""
        self.readme.write_text(readme_header(self.title, now), encoding="utf-8")
        return self.readme

    def append_readme_section(self, branch: str, now: datetime | None = None) -> Path:
        """Append *branch*'s section to the shared README."""
        with self.readme.open("a", encoding="utf-8") as fh:
            fh.write(readme_section(branch, now))
        return self.readme

    def write_marker(self, branch: str, now: datetime | None = None) -> Path:
        """Create or overwrite the marker file for *branch*."""
        path = self.root / marker_filename(branch)
        path.write_text(marker_content(branch, now), encoding="utf-8")
        return path
