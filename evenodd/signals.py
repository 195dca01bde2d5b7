"""Run state shared by the workers and shutdown on SIGINT/SIGTERM."""

from __future__ import annotations

import signal
import sys
import threading
from types import FrameType
from typing import Any, TextIO

from . import messages
from .linked_list import NumberList


class RunState:
    """Tracks whether the program should keep running and what to clean up."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._running = threading.Event()
        self._running.set()
        self._lock = threading.Lock()
        self._stream = stream
        self.even_list: NumberList | None = None
        self.odd_list: NumberList | None = None

    @property
    def running(self) -> bool:
        """Whether no stop request has been received yet."""
        return self._running.is_set()

    def _out(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def stop(self, signum: int) -> None:
        """Ask every worker to finish; only the first request is announced."""
        with self._lock:
            if not self._running.is_set():
                return
            self._out().write(messages.SIGNAL_RECEIVED.format(signum))
            self._running.clear()

    def _handle(self, signum: int, frame: FrameType | None) -> None:
        self.stop(signum)

    def install_handlers(self) -> dict[int, Any]:
        """Route SIGINT and SIGTERM to :meth:`stop`.

        Returns the handlers that were in place before, keyed by signal number.
        Raises RuntimeError if a handler cannot be installed.
        """
        previous: dict[int, Any] = {}
        for signum, error in (
            (signal.SIGINT, messages.SIGINT_ERROR),
            (signal.SIGTERM, messages.SIGTERM_ERROR),
        ):
            try:
                previous[signum] = signal.signal(signum, self._handle)
            except (OSError, ValueError) as exc:
                for restored, handler in previous.items():
                    signal.signal(restored, handler)
                raise RuntimeError(error.rstrip()) from exc
        return previous

    def register(self, even_list: NumberList | None, odd_list: NumberList | None) -> None:
        """Remember the lists to empty during :meth:`cleanup`."""
        self.even_list = even_list
        self.odd_list = odd_list

    def cleanup(self) -> None:
        """Empty the registered lists, reporting how many elements each held."""
        out = self._out()
        out.write(messages.CLEAN_RESOURCES)
        for numbers, header, counter in (
            (self.even_list, messages.FREE_EVEN_LIST, messages.NODES_COUNT_EVEN),
            (self.odd_list, messages.FREE_ODD_LIST, messages.NODES_COUNT_ODD),
        ):
            if numbers is None or len(numbers) == 0:
                continue
            out.write(header)
            out.write(counter.format(numbers.clear()))
        out.write(messages.CLEAN_COMPLETE)