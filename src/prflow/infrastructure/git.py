"""Subprocess wrapper around the git executable.

Each command runs to completion with its output captured; stdout and stderr
are then forwarded to the console, so long pushes print nothing until they
exit. Capturing stderr is what lets lock conflicts be detected: a command that fails
because another process holds a ``.lock`` file is retried with bounded
exponential backoff; any other non-zero exit raises
:class:`~prflow.errors.GitCommandError` unless ``fail_fast`` is disabled.
"""

from __future__ import annotations

import logging
import re
import subprocess
import time
from collections.abc import Callable
from pathlib import Path

import click

from prflow.config.models import RunnerConfig
from prflow.errors import GitCommandError

logger = logging.getLogger(__name__)

_LOCK_CONFLICT = re.compile(
    r"unable to create '[^']*\.lock'|\.lock'?: file exists|cannot lock ref",
    re.IGNORECASE,
)


def is_lock_conflict(stderr: str) -> bool:
    """Return True if *stderr* reports contention on a git lock file."""
    return _LOCK_CONFLICT.search(stderr) is not None


def backoff_delay(attempt: int, config: RunnerConfig) -> float:
    """Delay before retry number *attempt* (0-based), capped at ``backoff_max``."""
    return min(config.backoff_base * (2**attempt), config.backoff_max)


class GitRunner:
    """Run git commands inside a working directory."""

    def __init__(
        self,
        cwd: Path,
        config: RunnerConfig | None = None,
        *,
        echo: Callable[..., None] = click.echo,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._cwd = cwd
        self._config = config or RunnerConfig()
        self._echo = echo
        self._sleep = sleep

    @property
    def cwd(self) -> Path:
        return self._cwd

    def run(self, *args: str) -> subprocess.CompletedProcess[str]:
        """Run ``git <args>``, forwarding output, and return the completed process.

        Raises:
            GitCommandError: On a non-zero exit when ``fail_fast`` is set, or
                when a lock conflict outlasts ``lock_retries`` retries.
        """
        attempt = 0
        while True:
            result = self._execute(args)
            self._forward(result)
            if result.returncode == 0:
                break
            if is_lock_conflict(result.stderr) and attempt < self._config.lock_retries:
                delay = backoff_delay(attempt, self._config)
                logger.warning(
                    "git lock conflict on '%s', retrying in %.1fs",
                    " ".join(args),
                    delay,
                )
                self._sleep(delay)
                attempt += 1
                continue
            error = GitCommandError(self._command(args), result.returncode, result.stderr)
            if self._config.fail_fast:
                raise error
            logger.warning("%s; continuing", error.message)
            break

        if self._config.settle_delay:
            self._sleep(self._config.settle_delay)
        return result

    def remote_heads(self, remote: str) -> list[str]:
        """Return the branch names that exist on *remote*.

        Always raises :class:`GitCommandError` on failure: an unreachable
        remote cannot be proven empty.
        """
        result = self._execute(("ls-remote", "--heads", remote))
        if result.returncode != 0:
            raise GitCommandError(
                self._command(("ls-remote", "--heads", remote)),
                result.returncode,
                result.stderr,
            )
        heads: list[str] = []
        for line in result.stdout.splitlines():
            _, _, ref = line.partition("\t")
            if ref.startswith("refs/heads/"):
                heads.append(ref.removeprefix("refs/heads/"))
        return heads

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _command(self, args: tuple[str, ...]) -> list[str]:
        return [self._config.git_executable, *args]

    def _execute(self, args: tuple[str, ...]) -> subprocess.CompletedProcess[str]:
        cmd = self._command(args)
        logger.debug("running %s", " ".join(cmd))
        try:
            return subprocess.run(
                cmd,
                cwd=self._cwd,
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError as exc:
            raise GitCommandError(cmd, 127, str(exc)) from exc

    def _forward(self, result: subprocess.CompletedProcess[str]) -> None:
        if result.stdout:
            self._echo(result.stdout.rstrip("\n"))
        if result.stderr:
            self._echo(result.stderr.rstrip("\n"), err=True)
