"""Root CLI group for foldkit with global flags and command registration."""

from __future__ import annotations

import click

from foldkit import __version__
from foldkit.commands import register_commands
from foldkit.commands._context import AppContext
from foldkit.config.settings import FoldkitSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="foldkit")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Print only the bare result.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging and timing spans.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option(
    "--element-type",
    type=click.Choice(["int", "float", "str"]),
    default=None,
    help="How to parse values (default from config: int).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    element_type: str | None,
) -> None:
    """foldkit — list processing built on a single right fold."""
    settings = FoldkitSettings.from_cli(
        config_path=config_path,
        element_type=element_type,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
