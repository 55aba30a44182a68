"""Custom Click base classes and shared parameters.

PrflowCommand accepts an ``examples`` parameter; ``--examples`` prints them
and exits, keeping ``--help`` concise.
"""

from __future__ import annotations

from typing import Any

import click

from prflow.domain.repository import RepositoryUrl
from prflow.errors import InvalidRepositoryUrlError


def _add_examples_option(cmd: click.Command, examples: str) -> None:
    """Attach an eager ``--examples`` flag to a Click command."""

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show usage examples.",
        )
    )


class PrflowCommand(click.Command):
    """Click Command subclass that supports an ``--examples`` flag."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


def parse_repository(ctx: click.Context, _param: click.Parameter, value: str) -> RepositoryUrl:
    """Click callback validating REPO_URL against the configured hosting domain."""
    from prflow.commands._context import AppContext

    app = ctx.find_object(AppContext)
    domain = app.settings.hosting.domain if app is not None else "github.com"
    try:
        return RepositoryUrl.parse(value, domain=domain)
    except InvalidRepositoryUrlError as exc:
        raise click.BadParameter(exc.message) from exc


repository_argument = click.argument("repository", metavar="REPO_URL", callback=parse_repository)
