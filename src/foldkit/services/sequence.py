"""SequenceService — folds and derived operations over CLI-supplied values.

Each method parses its raw string values into a sequence, evaluates a
domain operation, and reports the outcome as a ServiceResult.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from foldkit.domain import fold as folds
from foldkit.domain.fusion import Pipeline
from foldkit.domain.operators import (
    CombineOp,
    resolve_combine,
    resolve_mapping,
    resolve_predicate,
)
from foldkit.domain.sequence import END, Node, Sequence, is_sequence, to_list
from foldkit.services.base import BaseService, InvalidInputError
from foldkit.services.result import ServiceResult
from foldkit.services.telemetry import trace_span, traced

logger = logging.getLogger(__name__)

STAGE_KINDS = ("map", "filter")


class SequenceService(BaseService):
    """Evaluate folds, maps, filters, reversals and pipelines."""

    # ── Operations ───────────────────────────────────────────────────

    @traced
    def fold(
        self,
        values: Iterable[str],
        combine: str,
        base: str | None = None,
    ) -> ServiceResult:
        def body() -> ServiceResult:
            fn = resolve_combine(combine)
            start = self._resolve_base(combine, base)
            seq = self._parse(values)
            with trace_span("fold"):
                result = folds.fold(fn, start, seq)
            logger.debug("fold %s over %d values", combine, folds.length(seq))
            return ServiceResult(
                ok=True,
                op="fold",
                data={
                    "combine": combine.lower(),
                    "base": self._present_value(start),
                    "result": self._present_value(result),
                },
            )

        return self._run("fold", body)

    @traced
    def map(self, values: Iterable[str], mapping: str) -> ServiceResult:
        def body() -> ServiceResult:
            fn = resolve_mapping(mapping)
            seq = self._parse(values)
            with trace_span("map"):
                mapped = folds.map(fn, seq)
            return ServiceResult(ok=True, op="map", data=self._sequence_data(mapped))

        return self._run("map", body)

    @traced
    def filter(self, values: Iterable[str], predicate: str) -> ServiceResult:
        def body() -> ServiceResult:
            fn = resolve_predicate(predicate)
            seq = self._parse(values)
            with trace_span("filter"):
                kept = folds.filter(fn, seq)
            data = self._sequence_data(kept)
            data["dropped"] = folds.length(seq) - data["count"]
            return ServiceResult(ok=True, op="filter", data=data)

        return self._run("filter", body)

    @traced
    def reverse(self, values: Iterable[str]) -> ServiceResult:
        def body() -> ServiceResult:
            seq = self._parse(values)
            with trace_span("reverse"):
                reversed_seq = folds.reverse(seq)
            return ServiceResult(ok=True, op="reverse", data=self._sequence_data(reversed_seq))

        return self._run("reverse", body)

    @traced
    def pipeline(
        self,
        values: Iterable[str],
        stages: Iterable[str],
        combine: str | None = None,
        base: str | None = None,
    ) -> ServiceResult:
        """Run ``map:<name>`` / ``filter:<name>`` stages as one fused fold.

        Without *combine* the surviving elements are collected into a
        sequence; with it they are folded directly.
        """

        def body() -> ServiceResult:
            stage_names = list(stages)
            pipe = self._build_pipeline(stage_names)
            seq = self._parse(values)
            if combine is None:
                with trace_span("pipeline.run"):
                    out = pipe.run(seq)
                data = self._sequence_data(out)
            else:
                fn = resolve_combine(combine)
                start = self._resolve_base(combine, base)
                with trace_span("pipeline.fold"):
                    result = pipe.fold(fn, start, seq)
                data = {"combine": combine.lower(), "result": self._present_value(result)}
            data["stages"] = stage_names
            return ServiceResult(ok=True, op="pipeline", data=data)

        return self._run("pipeline", body)

    @traced
    def check_laws(self, values: Iterable[str]) -> ServiceResult:
        """Evaluate the fold laws on the given values."""

        def body() -> ServiceResult:
            seq = self._parse(values)
            with trace_span("laws"):
                laws = [{"name": name, "holds": bool(check(seq))} for name, check in LAWS]
            all_hold = all(law["holds"] for law in laws)
            warnings = [] if all_hold else ["One or more laws do not hold"]
            return ServiceResult(
                ok=True,
                op="laws",
                data={"count": folds.length(seq), "laws": laws, "all_hold": all_hold},
                warnings=warnings,
            )

        return self._run("laws", body)

    # ── Helpers ──────────────────────────────────────────────────────

    def _parse(self, values: Iterable[str]) -> Sequence[Any]:
        with trace_span("parse") as span:
            seq = self._parse_values(values)
            if span is not None:
                span.annotate("element_type", self.element_type)
        return seq

    def _resolve_base(self, combine: str, base: str | None) -> Any:
        op = CombineOp(combine.lower())
        if op is CombineOp.CONS:
            if base is not None:
                msg = "The cons combine always folds onto End; drop --base"
                raise InvalidInputError("INVALID_INPUT", msg, base=base)
            return END
        if base is not None:
            return self._parse_value(base)
        if op is CombineOp.ADD:
            return "" if self.element_type == "str" else self._parse_value("0")
        if op is CombineOp.MUL and self.element_type != "str":
            return self._parse_value("1")
        msg = f"Combine '{op.value}' has no default base for {self.element_type}; pass --base"
        raise InvalidInputError("MISSING_BASE", msg, combine=op.value)

    def _build_pipeline(self, stage_names: list[str]) -> Pipeline:
        pipe = Pipeline()
        for spec in stage_names:
            kind, sep, name = spec.partition(":")
            if not sep or kind not in STAGE_KINDS or not name:
                msg = f"Stage {spec!r} must look like map:<name> or filter:<name>"
                raise InvalidInputError("INVALID_INPUT", msg, stage=spec)
            if kind == "map":
                pipe = pipe.map(resolve_mapping(name))
            else:
                pipe = pipe.filter(resolve_predicate(name))
        return pipe

    def _sequence_data(self, seq: Sequence[Any]) -> dict[str, Any]:
        data: dict[str, Any] = {"items": to_list(seq), "count": folds.length(seq)}
        if self._settings.output.style == "repr":
            data["sequence"] = repr(seq)
        return data

    def _present_value(self, value: Any) -> Any:
        """Sequences are reported as lists; everything else as-is."""
        if is_sequence(value):
            return to_list(value)
        return value


def _pair(value: Any) -> tuple[Any, Any]:
    return (value, value)


def _same_pair(pair: tuple[Any, Any]) -> bool:
    return pair[0] == pair[1]


LAWS: list[tuple[str, Any]] = [
    ("fold_identity", lambda s: folds.fold(Node, END, s) == s),
    ("map_identity", lambda s: folds.map(lambda x: x, s) == s),
    ("filter_always_true", lambda s: folds.filter(lambda _x: True, s) == s),
    ("filter_always_false", lambda s: folds.filter(lambda _x: False, s) is END),
    ("reverse_involution", lambda s: folds.reverse(folds.reverse(s)) == s),
    (
        "fold_left_cons_reverses",
        lambda s: folds.fold_left(lambda acc, x: Node(x, acc), END, s) == folds.reverse(s),
    ),
    ("append_end_identity", lambda s: folds.append(s, END) == s),
    (
        "fused_pipeline_matches_chain",
        lambda s: Pipeline().map(_pair).filter(_same_pair).run(s)
        == folds.filter(_same_pair, folds.map(_pair, s)),
    ),
]
