"""Page buffer owned by a reader."""

from __future__ import annotations

import threading
from collections.abc import Iterable
from typing import Any


class PageBuffer:
    """Ordered page contents plus a read cursor.

    The contents are held as a tuple and swapped wholesale on refill, so
    ``snapshot()`` can be called from an observer thread while the consumer
    drains the buffer.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._items: tuple[Any, ...] = ()
        self._cursor = 0

    def replace(self, items: Iterable[Any]) -> None:
        fresh = tuple(items)
        with self._lock:
            self._items = fresh
            self._cursor = 0

    def clear(self) -> None:
        with self._lock:
            self._items = ()
            self._cursor = 0

    def has_next(self) -> bool:
        with self._lock:
            return self._cursor < len(self._items)

    def take(self) -> Any:
        with self._lock:
            if self._cursor >= len(self._items):
                raise IndexError("page buffer is exhausted")
            item = self._items[self._cursor]
            self._cursor += 1
            return item

    def snapshot(self) -> tuple[Any, ...]:
        with self._lock:
            return self._items

    @property
    def cursor(self) -> int:
        with self._lock:
            return self._cursor

    @property
    def remaining(self) -> int:
        with self._lock:
            return len(self._items) - self._cursor

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)


__all__ = [
    "PageBuffer",
]
