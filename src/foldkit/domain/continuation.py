"""Continuations as explicit objects.

A continuation is a chain of steps, each a one-argument function. Applying
the chain feeds the accumulator through every step in order and returns
the final value. ``DONE`` is the empty chain, i.e. the identity.

Folds that thread state (``reverse``, ``fold_left``) build a chain with
:meth:`Continuation.push` and then apply it once. Application is a loop,
so a chain with one step per element of a long sequence never grows the
Python call stack.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any


class Continuation:
    """A linked chain of steps applied first to last."""

    __slots__ = ("step", "next")

    def __init__(
        self,
        step: Callable[[Any], Any] | None = None,
        next: Continuation | None = None,
    ) -> None:
        self.step = step
        self.next = next

    def push(self, step: Callable[[Any], Any]) -> Continuation:
        """Return a continuation that runs *step* and then this chain."""
        return Continuation(step, self)

    def __call__(self, value: Any) -> Any:
        current: Continuation | None = self
        while current is not None and current.step is not None:
            value = current.step(value)
            current = current.next
        return value

    def __len__(self) -> int:
        count = 0
        current: Continuation | None = self
        while current is not None and current.step is not None:
            count += 1
            current = current.next
        return count

    def __repr__(self) -> str:
        return f"Continuation(steps={len(self)})"


DONE = Continuation()
