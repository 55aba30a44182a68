"""ScenarioService — the ``run`` and ``plan`` operations."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

import click

from prflow.errors import PrflowError
from prflow.infrastructure.browser import PullRequestLauncher
from prflow.infrastructure.git import GitRunner
from prflow.infrastructure.workspace import Workspace
from prflow.services.driver import CommandRunner, Launcher, ScenarioDriver
from prflow.services.result import ServiceError, ServiceResult
from prflow.services.scenario import build_scenario, summarize

if TYPE_CHECKING:
    from prflow.config.settings import PrflowSettings
    from prflow.domain.repository import RepositoryUrl
    from prflow.domain.steps import Step

logger = logging.getLogger(__name__)


class ScenarioService:
    """Build and execute the demo scenario for one repository.

    Collaborators default to the real git runner and browser launcher;
    tests pass fakes.
    """

    def __init__(
        self,
        settings: PrflowSettings,
        repository: RepositoryUrl,
        *,
        runner: CommandRunner | None = None,
        launcher: Launcher | None = None,
        echo: Callable[..., None] = click.echo,
        pause: Callable[[str], None] | None = None,
    ) -> None:
        self._settings = settings
        self._repository = repository
        self._runner = runner or GitRunner(settings.workdir, settings.runner)
        self._launcher = launcher or PullRequestLauncher(repository, settings.browser)
        self._echo = echo
        self._pause = pause

    def steps(self, remote_url: str | None = None) -> list[Step]:
        return build_scenario(
            remote_url or self._repository.raw,
            remote=self._settings.hosting.remote_name,
        )

    def plan(self) -> ServiceResult:
        """List the scenario without executing anything."""
        steps = self.steps()
        return ServiceResult(
            ok=True,
            op="plan",
            data={
                "repository": self._repository.web_url,
                "steps": [
                    {"kind": s.kind.value, "description": s.describe(), "label": s.label}
                    for s in steps
                ],
                **summarize(steps),
            },
        )

    def run(self, *, step_by_step: bool = False, remote_url: str | None = None) -> ServiceResult:
        """Reset the workspace and drive the whole scenario.

        Args:
            step_by_step: Pause after every labeled step.
            remote_url: Push URL registered as the remote. Defaults to the
                repository URL itself.
        """
        workspace = Workspace(self._settings.workdir)
        removed = workspace.reset()
        steps = self.steps(remote_url)

        driver = ScenarioDriver(
            self._runner,
            self._launcher,
            workspace,
            remote=self._settings.hosting.remote_name,
            step_by_step=step_by_step,
            echo=self._echo,
            pause=self._pause,
        )
        try:
            driver.run(steps)
        except PrflowError as exc:
            logger.debug("run halted after %d steps", len(driver.completed), exc_info=True)
            return ServiceResult(
                ok=False,
                op="run",
                data={"steps_run": len(driver.completed), "steps_total": len(steps)},
                error=ServiceError(code=exc.code, message=exc.message, detail=exc.detail),
            )

        return ServiceResult(
            ok=True,
            op="run",
            data={
                "repository": self._repository.web_url,
                "workdir": str(self._settings.workdir),
                "steps_run": len(driver.completed),
                "removed": [str(p) for p in removed],
                **summarize(steps),
            },
        )
