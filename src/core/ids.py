"""Record id generation."""

from __future__ import annotations

import time
from collections.abc import Callable


class IdFactory:
    """Timestamp-derived ids (milliseconds), strictly increasing per factory.

    Two calls in the same millisecond still get distinct ids, and an id is
    never handed out twice, so ids of deleted records are not recycled.
    """

    def __init__(self, clock: Callable[[], float] = time.time) -> None:
        self._clock = clock
        self._last = 0

    def __call__(self) -> str:
        candidate = int(self._clock() * 1000)
        if candidate <= self._last:
            candidate = self._last + 1
        self._last = candidate
        return str(candidate)
