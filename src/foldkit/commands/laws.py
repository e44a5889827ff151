"""Command: check the fold laws on a set of values."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from foldkit.commands._base import FoldCommand

if TYPE_CHECKING:
    from foldkit.commands._context import AppContext


@click.command(
    cls=FoldCommand,
    examples="""\
  foldkit laws 1 2 3
  foldkit --json laws 5 4 3 2 1
  foldkit --element-type str laws a b""",
)
@click.argument("values", nargs=-1)
@click.pass_obj
def laws(app: AppContext, values: tuple[str, ...]) -> None:
    """Check identity, involution and fusion laws on VALUES."""
    app.emit(app.sequences.check_laws(values))
