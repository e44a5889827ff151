"""Hand-fused pipelines of map and filter stages.

Chaining ``filter(p, map(f, seq))`` walks the data twice and builds an
intermediate sequence. A *stage* instead rewrites the combine function a
fold will use, so a whole pipeline collapses into one combine and runs as
a single traversal::

    Pipeline().map(f).filter(p).fold(combine, base, seq)
        == fold(combine, base, filter(p, map(f, seq)))

Fusion here is explicit. Nothing inspects or rewrites user code.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from foldkit.domain.fold import fold
from foldkit.domain.sequence import END, Node, Sequence

Combine = Callable[[Any, Any], Any]
Stage = Callable[[Combine], Combine]


def mapping(f: Callable[[Any], Any]) -> Stage:
    """Stage that applies *f* to each element before it reaches the combine."""

    def stage(combine: Combine) -> Combine:
        def mapped(value: Any, acc: Any) -> Any:
            return combine(f(value), acc)

        return mapped

    return stage


def filtering(predicate: Callable[[Any], Any]) -> Stage:
    """Stage that drops elements failing *predicate*."""

    def stage(combine: Combine) -> Combine:
        def filtered(value: Any, acc: Any) -> Any:
            return combine(value, acc) if predicate(value) else acc

        return filtered

    return stage


@dataclass(frozen=True)
class Pipeline:
    """An ordered, immutable list of stages, read left to right."""

    stages: tuple[Stage, ...] = ()

    def map(self, f: Callable[[Any], Any]) -> Pipeline:
        return Pipeline((*self.stages, mapping(f)))

    def filter(self, predicate: Callable[[Any], Any]) -> Pipeline:
        return Pipeline((*self.stages, filtering(predicate)))

    def fuse(self, combine: Combine) -> Combine:
        """Wrap *combine* in every stage; the first stage ends up outermost."""
        for stage in reversed(self.stages):
            combine = stage(combine)
        return combine

    def fold(self, combine: Combine, base: Any, seq: Sequence[Any]) -> Any:
        return fold(self.fuse(combine), base, seq)

    def run(self, seq: Sequence[Any]) -> Sequence[Any]:
        """Apply the pipeline and collect the surviving elements."""
        return self.fold(Node, END, seq)
