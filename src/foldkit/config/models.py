"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, foldkit.toml only contains overrides.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

ElementType = Literal["int", "float", "str"]


class InputConfig(BaseModel):
    """[input] section."""

    model_config = {"frozen": True}

    element_type: ElementType = "int"
    max_length: int = Field(default=100_000, ge=0)


class OutputConfig(BaseModel):
    """[output] section.

    ``list`` renders sequences as plain lists; ``repr`` also includes the
    ``Node(..., End)`` form.
    """

    model_config = {"frozen": True}

    style: Literal["list", "repr"] = "list"
