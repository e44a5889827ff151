"""Immutable singly-linked sequences.

A sequence is a tagged union of two variants:

- ``Node(value, rest)`` holds one element and the remainder.
- ``End`` terminates every sequence. It is a singleton, exposed as ``END``.

INVARIANT: Sequences are never mutated. Every transformation builds new
nodes, so remainders may be shared freely between sequences.

Equality, hashing, ``repr`` and iteration walk the spine in a loop rather
than recursing, so sequences longer than the interpreter's recursion limit
behave like short ones.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

T = TypeVar("T")


class End:
    """The empty sequence. ``End()`` always returns the same object."""

    __slots__ = ()

    _instance: End | None = None

    def __new__(cls) -> End:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "End"

    def __iter__(self) -> Iterator[Any]:
        return iter(())

    def __reduce__(self) -> tuple[type[End], tuple[()]]:
        return (End, ())


END = End()


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class Node(Generic[T]):
    """One element of a sequence and a reference to the remainder."""

    value: T
    rest: Sequence[T]

    def __iter__(self) -> Iterator[T]:
        return iterate(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        left: Any = self
        right: Any = other
        while isinstance(left, Node) and isinstance(right, Node):
            if left is right:
                return True
            # Identical element objects compare equal, as in list and tuple.
            if left.value is not right.value and left.value != right.value:
                return False
            left, right = left.rest, right.rest
        return left is right

    def __hash__(self) -> int:
        return hash((Node, tuple(iterate(self))))

    def __repr__(self) -> str:
        values = list(iterate(self))
        head = "".join(f"Node({value!r}, " for value in values)
        return f"{head}End{')' * len(values)}"


Sequence = Union[Node[T], End]


def sequence(*values: T) -> Sequence[T]:
    """Build a sequence from positional arguments: ``sequence(1, 2)``."""
    return from_iterable(values)


def from_iterable(values: Iterable[T]) -> Sequence[T]:
    """Build a sequence holding *values* in iteration order.

    Nodes are created back to front, so the iterable is materialized first.
    """
    result: Sequence[T] = END
    for value in reversed(list(values)):
        result = Node(value, result)
    return result


def iterate(seq: Sequence[T]) -> Iterator[T]:
    """Yield the element values of *seq*, front to back."""
    current: Any = seq
    while isinstance(current, Node):
        yield current.value
        current = current.rest


def to_list(seq: Sequence[T]) -> list[T]:
    return list(iterate(seq))


def is_empty(seq: Sequence[Any]) -> bool:
    return seq is END


def is_sequence(obj: object) -> bool:
    """Check whether *obj* is one of the two sequence variants."""
    return isinstance(obj, (Node, End))
