"""Command: run the branching workflow demo."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from prflow.commands._base import PrflowCommand, repository_argument

if TYPE_CHECKING:
    from prflow.commands._context import AppContext
    from prflow.domain.repository import RepositoryUrl


@click.command(
    cls=PrflowCommand,
    examples="""\
  prflow run https://github.com/acme/pr-demo
  prflow run --step-by-step https://github.com/acme/pr-demo
  prflow -C /tmp/demo run --yes git@github.com:acme/pr-demo.git""",
)
@repository_argument
@click.option("--step-by-step", is_flag=True, help="Pause after every labeled step.")
@click.option("-y", "--yes", is_flag=True, help="Delete an existing .git without asking.")
@click.pass_obj
def run(app: AppContext, repository: RepositoryUrl, step_by_step: bool, yes: bool) -> None:
    """Build a demo repository and push it to the empty REPO_URL.

    Deletes any .git directory and markdown files in the working directory
    first. Pull requests are opened in the browser; complete them there
    and press Enter to continue.
    """
    from prflow.infrastructure.workspace import Workspace
    from prflow.services.run import ScenarioService

    workspace = Workspace(app.settings.workdir)
    if workspace.has_repository() and not yes:
        click.confirm(
            f"Delete the existing repository in {workspace.root}?",
            abort=True,
        )

    app.emit(ScenarioService(app.settings, repository).run(step_by_step=step_by_step))
