"""The fold primitive and the operations derived from it.

``fold(combine, base, seq)`` replaces every ``Node`` of *seq* with a call to
*combine* and the terminating ``End`` with *base*::

    Node(1, Node(2, End))  ->  combine(1, combine(2, base))

Every other function in this module is written as a single call to
:func:`fold`. ``map`` and ``filter`` intentionally shadow the builtins
inside this module; import them qualified or under an alias.

Behaviour on cyclic or malformed sequences is undefined.
"""

from __future__ import annotations

import operator
from collections.abc import Callable
from typing import Any, TypeVar

from foldkit.domain.continuation import DONE, Continuation
from foldkit.domain.sequence import END, Node, Sequence, is_sequence

T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")

__all__ = [
    "all_of",
    "any_of",
    "append",
    "concat",
    "filter",
    "fold",
    "fold_left",
    "length",
    "map",
    "product",
    "reverse",
    "total",
]


def fold(combine: Callable[[T, R], R], base: R, seq: Sequence[T]) -> R:
    """Right fold: substitute *combine* for ``Node`` and *base* for ``End``.

    The remainder is always folded before *combine* sees it. The spine is
    collected first and *combine* is applied from the last node backwards,
    so the fold is stack-safe for arbitrarily long sequences.

    Raises:
        TypeError: If *seq* is not a ``Node`` or ``End``.
    """
    if not is_sequence(seq):
        msg = f"fold expects a sequence, got {type(seq).__name__}"
        raise TypeError(msg)

    values: list[T] = []
    current: Any = seq
    while isinstance(current, Node):
        values.append(current.value)
        current = current.rest

    result = base
    for value in reversed(values):
        result = combine(value, result)
    return result


def map(f: Callable[[T], U], seq: Sequence[T]) -> Sequence[U]:  # noqa: A001
    return fold(lambda value, rest: Node(f(value), rest), END, seq)


def filter(predicate: Callable[[T], Any], seq: Sequence[T]) -> Sequence[T]:  # noqa: A001
    return fold(
        lambda value, rest: Node(value, rest) if predicate(value) else rest,
        END,
        seq,
    )


def reverse(seq: Sequence[T]) -> Sequence[T]:
    """Reverse *seq* by continuation passing.

    The fold builds a continuation that, given an accumulator, prepends the
    elements in processed order. Applying it to ``End`` yields the reversed
    sequence without any mutable accumulator variable.
    """
    prepend_all: Continuation = fold(
        lambda value, then: then.push(lambda acc: Node(value, acc)),
        DONE,
        seq,
    )
    return prepend_all(END)


def fold_left(step: Callable[[R, T], R], initial: R, seq: Sequence[T]) -> R:
    """Left fold expressed as a right fold.

    ``fold_left(step, z, sequence(a, b))`` is ``step(step(z, a), b)``. The
    right fold produces a continuation which is then applied to *initial*.
    """
    run: Continuation = fold(
        lambda value, then: then.push(lambda acc: step(acc, value)),
        DONE,
        seq,
    )
    return run(initial)


def length(seq: Sequence[Any]) -> int:
    return fold(lambda _value, count: count + 1, 0, seq)


def total(seq: Sequence[Any]) -> Any:
    return fold(operator.add, 0, seq)


def product(seq: Sequence[Any]) -> Any:
    return fold(operator.mul, 1, seq)


def append(left: Sequence[T], right: Sequence[T]) -> Sequence[T]:
    """Concatenate two sequences. *right* is shared, not copied."""
    return fold(Node, right, left)


def concat(seqs: Sequence[Sequence[T]]) -> Sequence[T]:
    """Flatten a sequence of sequences."""
    return fold(append, END, seqs)


def any_of(predicate: Callable[[T], Any], seq: Sequence[T]) -> bool:
    return fold(lambda value, found: bool(predicate(value)) or found, False, seq)


def all_of(predicate: Callable[[T], Any], seq: Sequence[T]) -> bool:
    return fold(lambda value, held: bool(predicate(value)) and held, True, seq)
