"""Command: list the scenario steps without running them."""

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
  prflow plan https://github.com/acme/pr-demo
  prflow --json plan git@github.com:acme/pr-demo.git""",
)
@repository_argument
@click.pass_obj
def plan(app: AppContext, repository: RepositoryUrl) -> None:
    """Show every step the demo would run against REPO_URL."""
    from prflow.services.run import ScenarioService

    app.emit(ScenarioService(app.settings, repository).plan())
