"""Root CLI group for prflow with global flags and command registration."""

from __future__ import annotations

from pathlib import Path

import click

from prflow import __version__
from prflow.commands import register_commands
from prflow.commands._context import AppContext
from prflow.config.settings import PrflowSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="prflow")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option(
    "-C",
    "--workdir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory to build the demo repository in (default: current directory).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    workdir: Path | None,
) -> None:
    """prflow — demo of resolving PR conflicts on disposable branches."""
    settings = PrflowSettings.from_cli(
        config_path=config_path,
        workdir=workdir.resolve() if workdir else None,
        json_output=json_output,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
