"""BaseService — shared input handling for foldkit services.

Services receive the frozen :class:`FoldkitSettings` at construction. Raw
CLI values arrive as strings; :meth:`BaseService._parse_values` converts
them to the configured element type and builds a sequence.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Any

from foldkit.config.logging import bound_operation
from foldkit.domain.operators import UnknownOperatorError
from foldkit.domain.sequence import Sequence, from_iterable
from foldkit.services.result import ServiceResult

if TYPE_CHECKING:
    from foldkit.config.settings import FoldkitSettings

logger = logging.getLogger(__name__)

_PARSERS: dict[str, Callable[[str], Any]] = {
    "int": int,
    "float": float,
    "str": str,
}


class InvalidInputError(Exception):
    """Input rejected before any fold runs. Carries a ServiceError code."""

    def __init__(self, code: str, message: str, **detail: Any) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.detail = detail


class BaseService:
    """Base for service classes.

    Subclasses implement operations as methods returning ServiceResult and
    delegate error translation to :meth:`_run`.
    """

    def __init__(self, settings: FoldkitSettings) -> None:
        self._settings = settings

    @property
    def element_type(self) -> str:
        return self._settings.input.element_type

    def _parse_value(self, raw: str) -> Any:
        try:
            return _PARSERS[self.element_type](raw)
        except ValueError:
            msg = f"Cannot parse {raw!r} as {self.element_type}"
            raise InvalidInputError("INVALID_INPUT", msg, value=raw) from None

    def _parse_values(self, values: Iterable[str]) -> Sequence[Any]:
        raw = list(values)
        limit = self._settings.input.max_length
        if len(raw) > limit:
            msg = f"Input has {len(raw)} values; the limit is {limit}"
            raise InvalidInputError("INPUT_TOO_LONG", msg, count=len(raw), limit=limit)
        return from_iterable(self._parse_value(v) for v in raw)

    def _run(self, op: str, body: Callable[[], ServiceResult]) -> ServiceResult:
        """Execute *body*, translating expected failures into error results.

        Log lines emitted while *body* runs are tagged with ``op``.
        """
        with bound_operation(op, element_type=self.element_type):
            try:
                return body()
            except InvalidInputError as exc:
                logger.debug("rejected input: %s", exc.message)
                return ServiceResult.failure(op, exc.code, exc.message, **exc.detail)
            except UnknownOperatorError as exc:
                return ServiceResult.failure(
                    op,
                    "UNKNOWN_OPERATOR",
                    str(exc),
                    family=exc.family,
                    name=exc.name,
                    known=exc.known,
                )
            except (TypeError, ValueError, ArithmeticError) as exc:
                logger.debug("operation failed", exc_info=True)
                return ServiceResult.failure(
                    op,
                    "OPERATION_FAILED",
                    f"{type(exc).__name__}: {exc}",
                )
