"""Command-line entry point."""

from __future__ import annotations

import signal
import sys
from collections.abc import Sequence

from . import messages
from .arguments import ArgumentError, HelpRequested, check_args
from .config import ConfigError, read_config
from .linked_list import NumberList
from .numbers import ProgressBar
from .signals import RunState
from .threads import run_workers


def main(argv: Sequence[str] | None = None) -> int:
    """Run the workers from a configuration file and print both lists."""
    args = list(sys.argv[1:] if argv is None else argv)
    state = RunState()
    try:
        previous = state.install_handlers()
    except RuntimeError as exc:
        sys.stderr.write(f"{exc}\n")
        return 1

    try:
        try:
            path = check_args(args)
        except HelpRequested as help_request:
            sys.stdout.write(help_request.message)
            return 1
        except ArgumentError as exc:
            sys.stderr.write(str(exc))
            return 1

        try:
            config = read_config(path)
        except ConfigError as exc:
            sys.stderr.write(f"{exc}\n")
            return 1

        even_list, odd_list = NumberList(), NumberList()
        progress = ProgressBar(config.thread_num * config.numbers_per_thread)
        state.register(even_list, odd_list)

        run_workers(config, even_list, odd_list, state, progress)

        if not state.running:
            sys.stdout.write(messages.PROGRAM_INTERRUPTED)
            state.cleanup()
        else:
            sys.stdout.write(messages.EVEN_LIST_HEADER)
            sys.stdout.write(even_list.format())
            sys.stdout.write(messages.ODD_LIST_HEADER)
            sys.stdout.write(odd_list.format())
        sys.stdout.flush()
        return 0
    finally:
        for signum, handler in previous.items():
            signal.signal(signum, handler)


if __name__ == "__main__":
    sys.exit(main())