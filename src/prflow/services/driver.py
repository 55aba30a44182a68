"""ScenarioDriver — interprets step descriptors one after another.

There is no state beyond the position in the list: each step runs to
completion before the next starts, and the first exception ends the run.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Protocol

import click

from prflow.domain.steps import Step, StepKind
from prflow.errors import RemoteNotEmptyError
from prflow.infrastructure.browser import wait_for_enter
from prflow.infrastructure.workspace import Workspace

logger = logging.getLogger(__name__)


class CommandRunner(Protocol):
    def run(self, *args: str) -> object: ...

    def remote_heads(self, remote: str) -> list[str]: ...


class Launcher(Protocol):
    def launch(self, source: str, target: str, *, expect_conflict: bool = False) -> str: ...


class ScenarioDriver:
    """Run a scenario against a git runner, a PR launcher, and a workspace.

    Args:
        step_by_step: Pause for confirmation after every labeled step.
        remote: Name of the remote checked by ``verify_remote_empty``.
    """

    def __init__(
        self,
        runner: CommandRunner,
        launcher: Launcher,
        workspace: Workspace,
        *,
        remote: str = "origin",
        step_by_step: bool = False,
        echo: Callable[..., None] = click.echo,
        pause: Callable[[str], None] | None = None,
    ) -> None:
        self._runner = runner
        self._launcher = launcher
        self._workspace = workspace
        self._remote = remote
        self._step_by_step = step_by_step
        self._echo = echo
        self._pause = pause or wait_for_enter
        self.completed: list[Step] = []
        self.pull_request_urls: list[str] = []

    def run(self, steps: Sequence[Step]) -> list[Step]:
        """Execute *steps* in order and return the completed ones."""
        total = len(steps)
        handlers: dict[StepKind, Callable[[Step], None]] = {
            StepKind.GIT: self._git,
            StepKind.WRITE_README: self._write_readme,
            StepKind.WRITE_MARKER: self._write_marker,
            StepKind.VERIFY_REMOTE_EMPTY: self._verify_remote_empty,
            StepKind.OPEN_PR: self._open_pr,
        }
        for index, step in enumerate(steps, start=1):
            self._echo(f"[{index}/{total}] {step.describe()}")
            logger.debug("step %d/%d: %s", index, total, step.describe())
            handlers[step.kind](step)
            self.completed.append(step)
            if self._step_by_step and step.label:
                self._pause(f"{step.label}: done. Press Enter to continue...")
        return self.completed

    # ------------------------------------------------------------------
    # Step handlers
    # ------------------------------------------------------------------

    def _git(self, step: Step) -> None:
        self._runner.run(*step.args)

    def _write_readme(self, step: Step) -> None:
        if step.args:
            self._workspace.append_readme_section(step.args[0])
        else:
            self._workspace.write_readme()

    def _write_marker(self, step: Step) -> None:
        self._workspace.write_marker(step.args[0])

    def _verify_remote_empty(self, step: Step) -> None:
        heads = self._runner.remote_heads(self._remote)
        if heads:
            raise RemoteNotEmptyError(
                f"Remote '{self._remote}' already has branches: {', '.join(heads)}. "
                "Use a newly created, empty repository.",
                branches=heads,
            )

    def _open_pr(self, step: Step) -> None:
        source, target = step.args
        url = self._launcher.launch(source, target, expect_conflict=step.expect_conflict)
        self.pull_request_urls.append(url)
