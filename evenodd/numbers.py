"""Random number generation and the shared progress bar."""

from __future__ import annotations

import random
import sys
import threading
from typing import TextIO

_BAR_WIDTH = 50
_MIN_RANGE = 1000
_UNIQUE_LIMIT = 100_000
_MAX_ATTEMPTS = 1000
_LARGE_TOTAL = 1_000_000


def is_even(number: int) -> bool:
    """Return whether ``number`` is even."""
    return number % 2 == 0


def generate_unique_numbers(count: int, rng: random.Random) -> list[int]:
    """Draw ``count`` numbers from ``[0, max(10 * count, 1000))``.

    Up to 100000 numbers are kept distinct (giving up on a slot after 1000
    tries); beyond that duplicates are allowed.
    """
    if count < 0:
        raise ValueError("count must not be negative")
    upper = max(count * 10, _MIN_RANGE)

    if count > _UNIQUE_LIMIT:
        return [rng.randrange(upper) for _ in range(count)]

    used: set[int] = set()
    numbers: list[int] = []
    for _ in range(count):
        for _attempt in range(_MAX_ATTEMPTS + 1):
            num = rng.randrange(upper)
            if num not in used:
                break
        used.add(num)
        numbers.append(num)
    return numbers


class ProgressBar:
    """A thread-safe textual progress bar redrawn in place."""

    def __init__(self, total: int = 0, stream: TextIO | None = None) -> None:
        self._lock = threading.Lock()
        self._stream = stream
        self.total = total
        self.completed = 0
        self._last_update = 0
        self._last_current = 0
        self._frequency = 1

    def reset(self, total: int) -> None:
        """Start counting again towards ``total`` operations."""
        with self._lock:
            self.total = total
            self.completed = 0
            self._last_update = 0
            self._last_current = 0

    def update(self, increment: int) -> None:
        """Record ``increment`` finished operations and redraw when due."""
        with self._lock:
            self.completed += increment
            if self.total > _LARGE_TOTAL:
                self._frequency = self.total // 1000

            finished = self.completed >= self.total
            if self.completed - self._last_update < self._frequency and not finished:
                return

            self._last_update = self.completed
            stream = self._stream if self._stream is not None else sys.stdout
            stream.write("\r" + self._render())
            if finished:
                stream.write("\n")
            stream.flush()

    def advance_to(self, current: int) -> None:
        """Move the bar forward to an absolute count; going back is ignored."""
        with self._lock:
            delta = current - self._last_current
            if delta <= 0:
                return
            self._last_current = current
        self.update(delta)

    def render(self) -> str:
        """Return the bar as text, e.g. ``[=====     ] 50.00%``."""
        with self._lock:
            return self._render()

    def _render(self) -> str:
        progress = self.completed / self.total if self.total > 0 else 1.0
        filled = min(max(int(_BAR_WIDTH * progress), 0), _BAR_WIDTH)
        bar = "=" * filled + " " * (_BAR_WIDTH - filled)
        return f"[{bar}] {progress * 100:.2f}%"