"""Subcommand modules for foldkit.

Provides register_commands() which uses deferred imports to keep
``foldkit --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all commands on the root CLI group."""
    from foldkit.commands.laws import laws
    from foldkit.commands.sequence import filter_cmd, fold_cmd, map_cmd, pipeline, reverse

    cli.add_command(fold_cmd)
    cli.add_command(map_cmd)
    cli.add_command(filter_cmd)
    cli.add_command(reverse)
    cli.add_command(pipeline)
    cli.add_command(laws)
