"""Named operators for folds, mappings and predicates.

The CLI and service layer refer to functions by name. Each family is a
``StrEnum`` paired with a lookup table; resolvers raise
:class:`UnknownOperatorError` for names outside the table.
"""

from __future__ import annotations

import operator
from collections.abc import Callable
from enum import StrEnum
from typing import Any

from foldkit.domain.sequence import Node


class UnknownOperatorError(ValueError):
    """Raised when an operator name is not registered."""

    def __init__(self, family: str, name: str, known: list[str]) -> None:
        self.family = family
        self.name = name
        self.known = known
        super().__init__(f"Unknown {family} operator '{name}' (known: {', '.join(known)})")


class CombineOp(StrEnum):
    """Binary functions usable as the combine of a fold."""

    ADD = "add"
    MUL = "mul"
    MAX = "max"
    MIN = "min"
    CONS = "cons"


class MappingOp(StrEnum):
    """Unary functions usable with map."""

    ID = "id"
    DOUBLE = "double"
    SQUARE = "square"
    NEGATE = "negate"
    INCR = "incr"


class PredicateOp(StrEnum):
    """Predicates usable with filter."""

    ODD = "odd"
    EVEN = "even"
    POSITIVE = "positive"
    NONZERO = "nonzero"
    TRUE = "true"
    FALSE = "false"


COMBINES: dict[CombineOp, Callable[[Any, Any], Any]] = {
    CombineOp.ADD: operator.add,
    CombineOp.MUL: operator.mul,
    CombineOp.MAX: max,
    CombineOp.MIN: min,
    CombineOp.CONS: Node,
}

MAPPINGS: dict[MappingOp, Callable[[Any], Any]] = {
    MappingOp.ID: lambda x: x,
    MappingOp.DOUBLE: lambda x: x * 2,
    MappingOp.SQUARE: lambda x: x * x,
    MappingOp.NEGATE: operator.neg,
    MappingOp.INCR: lambda x: x + 1,
}

PREDICATES: dict[PredicateOp, Callable[[Any], bool]] = {
    PredicateOp.ODD: lambda x: x % 2 == 1,
    PredicateOp.EVEN: lambda x: x % 2 == 0,
    PredicateOp.POSITIVE: lambda x: x > 0,
    PredicateOp.NONZERO: bool,
    PredicateOp.TRUE: lambda _x: True,
    PredicateOp.FALSE: lambda _x: False,
}


def _resolve(family: str, enum: type[StrEnum], table: dict[Any, Any], name: str) -> Any:
    try:
        return table[enum(name.lower())]
    except ValueError:
        raise UnknownOperatorError(family, name, [m.value for m in enum]) from None


def resolve_combine(name: str) -> Callable[[Any, Any], Any]:
    return _resolve("combine", CombineOp, COMBINES, name)


def resolve_mapping(name: str) -> Callable[[Any], Any]:
    return _resolve("mapping", MappingOp, MAPPINGS, name)


def resolve_predicate(name: str) -> Callable[[Any], bool]:
    return _resolve("predicate", PredicateOp, PREDICATES, name)
