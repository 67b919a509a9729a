"""Pending matchers awaiting consumption by a stub or verification."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, TypeVar

from littlemock.core.errors import MatcherLeakError, UsageError
from littlemock.core.messages import leaked_matchers

if TYPE_CHECKING:
    from collections.abc import Iterator

    from littlemock.core.matchers import Matcher

V = TypeVar("V")

logger = logging.getLogger(__name__)


class MatcherStack:
    """Matchers created while evaluating the arguments of a specified call.

    Matcher factories push here and return a placeholder that goes in the
    argument position. The specification call then drains exactly one matcher
    per parameter. Anything left over is a programming error that is reported
    by the next consuming operation.
    """

    __slots__ = ("_pending",)

    def __init__(self) -> None:
        self._pending: list[Matcher] = []

    def push(self, matcher: Matcher, placeholder: V) -> V:
        """Store ``matcher`` and hand back ``placeholder``."""
        self._pending.append(matcher)
        return placeholder

    def drain(self, arity: int) -> list[Matcher]:
        """Remove and return the pending matchers, which must number ``arity``.

        Raises:
            UsageError: The number of pending matchers differs from ``arity``;
                matchers and literal arguments were mixed in one call
        """
        pending = list(self._pending)
        self._pending.clear()
        if len(pending) != arity:
            raise UsageError(
                f"Invalid use of argument matchers: {arity} matchers expected, "
                f"{len(pending)} recorded: {', '.join(m.describe() for m in pending)}. "
                "Use matchers for every argument or for none of them."
            )
        return pending

    def check_empty(self) -> None:
        """Fail if matchers were left behind, clearing them first.

        Raises:
            MatcherLeakError: Matchers were created but never consumed
        """
        if not self._pending:
            return
        leaked = list(self._pending)
        self._pending.clear()
        logger.debug("Discarding %d leaked matcher(s)", len(leaked))
        raise MatcherLeakError(leaked_matchers(leaked))

    def clear(self) -> None:
        self._pending.clear()

    def __len__(self) -> int:
        return len(self._pending)

    def __bool__(self) -> bool:
        return bool(self._pending)

    def __iter__(self) -> Iterator[Matcher]:
        return iter(list(self._pending))
