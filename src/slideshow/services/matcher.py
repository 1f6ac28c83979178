"""Bounded-window greedy matching shared by slide building and sequencing."""

import logging
from collections import deque
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Generic, Protocol, TypeVar

from slideshow.config import DEFAULT_WINDOW_CAP
from slideshow.errors import ConfigurationError

T = TypeVar("T")
T_contra = TypeVar("T_contra", contravariant=True)

MIN_WINDOW = 3

_logger = logging.getLogger(__name__)


class Emit(Protocol[T_contra]):
    """Receives each extraction: a matched pair or a single leftover."""

    def __call__(self, *group: T_contra) -> None:
        """Consume one extracted group."""


@dataclass
class WindowedGreedyMatcher(Generic[T]):
    """Greedy pairing over a window that slides along a shrinking pool.

    Each step looks at the first ``window`` elements of the pool, takes the
    middle one as the center and pairs it with the highest scoring element of
    the rest of the window. Ties go to the earliest element. Pairs are emitted
    as ``(center, best_match)`` and never revisited. ``window`` starts at
    ``window_cap`` and drops by two whenever the pool gets smaller than it, so
    it stays odd and the center is always the exact middle.
    """

    window_cap: int = DEFAULT_WINDOW_CAP

    def __post_init__(self) -> None:
        if self.window_cap < MIN_WINDOW:
            raise ConfigurationError(
                f"window cap must be at least {MIN_WINDOW}, got {self.window_cap}"
            )
        if self.window_cap % 2 == 0:
            raise ConfigurationError(
                f"window cap must be odd, got {self.window_cap}"
            )

    def run(
        self,
        items: Sequence[T],
        score: Callable[[T, T], float],
        emit: Emit[T],
    ) -> None:
        """Consume ``items`` in order and hand every extraction to ``emit``."""
        # The pool is ``visible`` followed by ``pending``; only ``visible``
        # (at most ``window`` elements) is ever scanned or removed from.
        window = self.window_cap
        visible = list(items[:window])
        pending = deque(items[window:])

        while visible:
            size = len(visible) + len(pending)
            if size == 1:
                emit(visible.pop())
                continue
            if size == 2:  # noqa: PLR2004
                first, second = visible
                visible.clear()
                emit(first, second)
                continue
            if size < window:
                window -= 2
                _logger.debug("Window shrunk to %s for pool of %s", window, size)
                continue

            center_index = window // 2
            center = visible[center_index]
            candidates = [*range(center_index), *range(center_index + 1, window)]
            best_index = max(candidates, key=lambda index: score(center, visible[index]))
            best_match = visible[best_index]
            emit(center, best_match)

            for index in sorted((center_index, best_index), reverse=True):
                del visible[index]
            while len(visible) < window and pending:
                visible.append(pending.popleft())
