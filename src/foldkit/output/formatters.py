"""Rich/JSON output dispatch.

The CLI renders ServiceResult for humans (Rich) or machines (--json).
``--quiet`` prints only the bare value.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

from foldkit.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from foldkit.services.result import ServiceResult


class OutputSettings(BaseModel):
    """Output mode flags, resolved once from the CLI settings."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult. JSON wins over quiet, quiet over verbose."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose)
