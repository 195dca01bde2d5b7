"""Worker threads that generate numbers and sort them by parity."""

from __future__ import annotations

import random
import sys
import threading
import time
from dataclasses import dataclass

from . import messages
from .config import Config
from .linked_list import NumberList
from .numbers import ProgressBar, generate_unique_numbers, is_even
from .signals import RunState


@dataclass
class WorkerTask:
    """One worker's job: draw ``count`` numbers and file them by parity."""

    rng: random.Random
    count: int
    even_list: NumberList
    odd_list: NumberList
    state: RunState
    progress: ProgressBar
    delay: float = 0.001

    def run(self) -> None:
        """Generate the numbers and append each to its list until stopped."""
        for number in generate_unique_numbers(self.count, self.rng):
            if not self.state.running:
                break
            target = self.even_list if is_even(number) else self.odd_list
            target.append(number)
            self.progress.update(1)
            if self.delay > 0:
                time.sleep(self.delay)


def run_workers(
    config: Config,
    even_list: NumberList,
    odd_list: NumberList,
    state: RunState,
    progress: ProgressBar,
    delay: float = 0.001,
) -> int:
    """Start one thread per configured worker, wait for all, return how many ran."""
    base_seed = int(time.time())
    threads: list[threading.Thread] = []
    for index in range(config.thread_num):
        if not state.running:
            break
        task = WorkerTask(
            rng=random.Random(base_seed + index),
            count=config.numbers_per_thread,
            even_list=even_list,
            odd_list=odd_list,
            state=state,
            progress=progress,
            delay=delay,
        )
        thread = threading.Thread(target=task.run, name=f"worker-{index}")
        try:
            thread.start()
        except RuntimeError:
            sys.stderr.write(messages.THREAD_CREATE_ERROR.format(index))
            break
        threads.append(thread)

    for thread in threads:
        thread.join()
    return len(threads)