"""A thread-safe, append-only list of integers."""

from __future__ import annotations

import threading
from collections.abc import Iterator


class NumberList:
    """Integers kept in insertion order; appends may come from many threads."""

    def __init__(self) -> None:
        self._items: list[int] = []
        self._lock = threading.Lock()

    def append(self, value: int) -> None:
        """Add ``value`` at the end of the list."""
        with self._lock:
            self._items.append(value)

    def clear(self) -> int:
        """Remove every element and return how many there were."""
        with self._lock:
            count = len(self._items)
            self._items.clear()
            return count

    def format(self) -> str:
        """Render the elements separated by ``", "``."""
        with self._lock:
            return ", ".join(str(item) for item in self._items)

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def __iter__(self) -> Iterator[int]:
        with self._lock:
            snapshot = list(self._items)
        return iter(snapshot)

    def __repr__(self) -> str:
        return f"NumberList([{self.format()}])"