"""Sequence-based generator for entity ids and business numbers.

One counter feeds both kinds of identifier, so every value it hands out is
unique for the life of the process. The counter is never reset (not even at
midnight); business numbers are unique because the sequence is.

  entity id:        plan-1770625800000-11
  business number:  PL-20260209-012
"""

import threading
from collections.abc import Callable
from datetime import datetime

from src.lng_common.datetime_utils import date_tag, utc_now


class SequenceCounter:
    """Monotonically increasing integer counter, safe to share across threads."""

    def __init__(self, start: int = 10) -> None:
        if start < 0:
            raise ValueError(f"start must be >= 0, got {start}")
        self._next = start
        self._lock = threading.Lock()

    def next_value(self) -> int:
        with self._lock:
            value = self._next
            self._next += 1
            return value

    def peek(self) -> int:
        with self._lock:
            return self._next


class IdFactory:
    """Builds ids and business numbers from an injected counter and clock."""

    def __init__(
        self,
        counter: SequenceCounter | None = None,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._counter = counter or SequenceCounter()
        self._clock = clock

    def next_id(self, prefix: str) -> str:
        millis = int(self._clock().timestamp() * 1000)
        return f"{prefix}-{millis}-{self._counter.next_value()}"

    def next_no(self, prefix: str) -> str:
        tag = date_tag(self._clock())
        return f"{prefix}-{tag}-{self._counter.next_value():03d}"
