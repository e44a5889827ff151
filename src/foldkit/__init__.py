"""foldkit — list processing built on a single right fold.

The public API re-exports the domain layer::

    >>> from foldkit import fold, sequence
    >>> fold(lambda x, acc: x + acc, 0, sequence(1, 2, 3))
    6
"""

from foldkit.domain.continuation import DONE, Continuation
from foldkit.domain.fold import (
    all_of,
    any_of,
    append,
    concat,
    filter,
    fold,
    fold_left,
    length,
    map,
    product,
    reverse,
    total,
)
from foldkit.domain.fusion import Pipeline, filtering, mapping
from foldkit.domain.sequence import (
    END,
    End,
    Node,
    Sequence,
    from_iterable,
    is_empty,
    iterate,
    sequence,
    to_list,
)

__version__ = "0.1.0"

__all__ = [
    "DONE",
    "END",
    "Continuation",
    "End",
    "Node",
    "Pipeline",
    "Sequence",
    "__version__",
    "all_of",
    "any_of",
    "append",
    "concat",
    "filter",
    "filtering",
    "fold",
    "fold_left",
    "from_iterable",
    "is_empty",
    "iterate",
    "length",
    "map",
    "mapping",
    "product",
    "reverse",
    "sequence",
    "to_list",
    "total",
]
