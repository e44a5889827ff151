"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from foldkit.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from foldkit.services.result import ServiceResult


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Minimal output: the bare value or items, one per line."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    if "result" in result.data:
        return _plain(result.data["result"])
    if "items" in result.data:
        return "\n".join(_plain(item) for item in result.data["items"])
    if "all_hold" in result.data:
        return "ok" if result.data["all_hold"] else "fail"
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _plain(value: Any) -> str:
    if isinstance(value, (list, dict)):
        return json.dumps(value, separators=(",", ":"))
    return str(value)


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="fk.ok"), Text(f"  {result.op}", style="fk.op"))


def _field(console: Console, key: str, value: Any) -> None:
    style = "fk.value" if key in ("result", "items") else ""
    console.print(Text.assemble((f"  {key}: ", "fk.key"), (_plain(value), style)))


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print the meta block, including the telemetry span tree."""
    if not result.meta:
        return
    console.print()
    console.print(Text("  meta:", style="dim"))
    for key, value in result.meta.items():
        if key == "telemetry":
            _render_span(console, value, indent=4)
        else:
            console.print(Text(f"    {key}: {value}"))


def _render_span(console: Console, span: dict[str, Any], indent: int) -> None:
    duration = span.get("duration_ms", 0.0)
    style = "yellow" if duration > 100 else "dim"
    line = Text(" " * indent)
    line.append(f"{duration:>9.3f}ms", style=style)
    line.append(f"  {span.get('name', '?')}")
    annotations = span.get("annotations") or {}
    if annotations:
        line.append("  (" + ", ".join(f"{k}={v}" for k, v in annotations.items()) + ")")
    console.print(line)
    for child in span.get("children", []):
        _render_span(console, child, indent + 4)


# ── Renderers ─────────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text("ERROR", style="fk.error"),
        Text(f"  {result.op}", style="fk.op"),
        Text(" — "),
        Text(msg),
    )
    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


def _render_value(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """fold results, and pipelines that ended in a fold."""
    _status_line(console, result)
    for key in ("combine", "base", "stages", "result"):
        if key in result.data:
            _field(console, key, result.data[key])
    if verbose:
        _render_meta(console, result)


def _render_sequence(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """map / filter / reverse results, and pipelines collecting a sequence."""
    if "result" in result.data:
        _render_value(result, console, verbose=verbose)
        return
    _status_line(console, result)
    for key in ("stages", "items", "count", "dropped", "sequence"):
        if key in result.data:
            _field(console, key, result.data[key])
    if verbose:
        _render_meta(console, result)


def _render_laws(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    table = Table(show_header=True, pad_edge=False, expand=False)
    table.add_column("Law")
    table.add_column("Holds", justify="center")
    for law in result.data.get("laws", []):
        holds = bool(law.get("holds"))
        mark = Text("yes", style="fk.holds") if holds else Text("no", style="fk.fails")
        table.add_row(str(law.get("name", "?")), mark)
    console.print(table)

    verdict = "all laws hold" if result.data.get("all_hold") else "some laws fail"
    console.print(f"\n{result.data.get('count', 0)} values, {verdict}")
    if verbose:
        _render_meta(console, result)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)
    if verbose:
        _render_meta(console, result)


_OP_RENDERERS: dict[str, Any] = {
    "fold": _render_value,
    "map": _render_sequence,
    "filter": _render_sequence,
    "reverse": _render_sequence,
    "pipeline": _render_sequence,
    "laws": _render_laws,
}
