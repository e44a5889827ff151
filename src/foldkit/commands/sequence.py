"""Commands: fold, map, filter, reverse, and fused pipelines."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from foldkit.commands._base import FoldCommand
from foldkit.domain.operators import CombineOp, MappingOp, PredicateOp

if TYPE_CHECKING:
    from foldkit.commands._context import AppContext


def _names(enum: type[CombineOp] | type[MappingOp] | type[PredicateOp]) -> str:
    return ", ".join(member.value for member in enum)


@click.command(
    name="fold",
    cls=FoldCommand,
    examples="""\
  foldkit fold 1 2 3                    # add, base 0 -> 6
  foldkit fold --with mul 1 2 3 4       # base 1 -> 24
  foldkit fold --with max --base 0 3 9 2
  foldkit fold --with cons 1 2 3        # rebuilds the input
  foldkit --element-type str fold a b c""",
)
@click.option(
    "--with",
    "combine",
    default=CombineOp.ADD.value,
    show_default=True,
    help=f"Combine function: {_names(CombineOp)}.",
)
@click.option("--base", default=None, help="Value substituted for End.")
@click.argument("values", nargs=-1)
@click.pass_obj
def fold_cmd(app: AppContext, combine: str, base: str | None, values: tuple[str, ...]) -> None:
    """Right-fold VALUES with a combine function and a base value."""
    app.emit(app.sequences.fold(values, combine, base=base))


@click.command(
    name="map",
    cls=FoldCommand,
    examples="""\
  foldkit map --fn double 1 2 3
  foldkit map --fn negate -- -1 2""",
)
@click.option("--fn", "mapping", required=True, help=f"Mapping: {_names(MappingOp)}.")
@click.argument("values", nargs=-1)
@click.pass_obj
def map_cmd(app: AppContext, mapping: str, values: tuple[str, ...]) -> None:
    """Apply a function to every value."""
    app.emit(app.sequences.map(values, mapping))


@click.command(
    name="filter",
    cls=FoldCommand,
    examples="""\
  foldkit filter --keep odd 1 2 3 4 5
  foldkit --json filter --keep positive -- -2 -1 0 1 2""",
)
@click.option("--keep", "predicate", required=True, help=f"Predicate: {_names(PredicateOp)}.")
@click.argument("values", nargs=-1)
@click.pass_obj
def filter_cmd(app: AppContext, predicate: str, values: tuple[str, ...]) -> None:
    """Keep the values satisfying a predicate."""
    app.emit(app.sequences.filter(values, predicate))


@click.command(
    cls=FoldCommand,
    examples="""\
  foldkit reverse 1 2 3
  foldkit --element-type str reverse x y z""",
)
@click.argument("values", nargs=-1)
@click.pass_obj
def reverse(app: AppContext, values: tuple[str, ...]) -> None:
    """Reverse the values using a continuation-passing fold."""
    app.emit(app.sequences.reverse(values))


@click.command(
    cls=FoldCommand,
    examples="""\
  foldkit pipeline -s map:square -s filter:even 1 2 3 4
  foldkit pipeline -s filter:odd -s map:double --with add 1 2 3 4 5""",
)
@click.option(
    "-s",
    "--stage",
    "stages",
    multiple=True,
    help="Stage as map:<name> or filter:<name>; repeat in order.",
)
@click.option("--with", "combine", default=None, help="Fold the result instead of collecting it.")
@click.option("--base", default=None, help="Base value when --with is given.")
@click.argument("values", nargs=-1)
@click.pass_obj
def pipeline(
    app: AppContext,
    stages: tuple[str, ...],
    combine: str | None,
    base: str | None,
    values: tuple[str, ...],
) -> None:
    """Run map/filter stages fused into a single fold over VALUES."""
    app.emit(app.sequences.pipeline(values, stages, combine=combine, base=base))
