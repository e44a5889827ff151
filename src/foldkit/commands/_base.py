"""Click Command subclass with --examples support.

When ``--examples`` is passed, the command prints usage examples and exits.
This keeps ``--help`` concise while making examples available on demand.
"""

from __future__ import annotations

import difflib
from typing import Any

import click


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


def _is_number(token: str) -> bool:
    try:
        float(token)
    except ValueError:
        return False
    return True


class FoldCommand(click.Command):
    """Command that accepts an ``examples`` string and negative-number values.

    Dash-prefixed tokens that parse as numbers, such as ``-3`` or ``-0.5``,
    are passed through as positional values. Any other unknown option is
    still rejected with a usage error.
    """

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        context_settings = {"ignore_unknown_options": True, **kwargs.pop("context_settings", {})}
        super().__init__(*args, context_settings=context_settings, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        if not ctx.resilient_parsing:
            self._reject_unknown_options(ctx, args)
        return super().parse_args(ctx, args)

    def _reject_unknown_options(self, ctx: click.Context, args: list[str]) -> None:
        known: dict[str, click.Option] = {}
        for param in self.get_params(ctx):
            if isinstance(param, click.Option):
                for opt in (*param.opts, *param.secondary_opts):
                    known[opt] = param

        takes_value = False
        for token in args:
            if takes_value:
                takes_value = False
                continue
            if token == "--":
                return
            if not token.startswith("-") or token == "-" or _is_number(token):
                continue

            name, eq, _ = token.partition("=")
            option = known.get(name)
            if option is None and not token.startswith("--"):
                # Short option with an attached value, e.g. -smap:double
                option = known.get(token[:2])
                eq = eq or token[2:]
            if option is None:
                possibilities = difflib.get_close_matches(name, known)
                raise click.NoSuchOption(name, possibilities=possibilities, ctx=ctx)
            takes_value = not eq and not option.is_flag and not option.count
