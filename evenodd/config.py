"""Reading the worker configuration file."""

from __future__ import annotations

import re
from dataclasses import dataclass
from os import PathLike

from . import messages

_LINE = re.compile(
    r"\s*(?P<key>%s|%s)\s*=\s*(?P<value>[+-]?\d+)\s*"
    % (re.escape(messages.CONFIG_NUMBERS), re.escape(messages.CONFIG_THREADS))
)


class ConfigError(ValueError):
    """Raised when the configuration file is missing or invalid."""


@dataclass(frozen=True)
class Config:
    """How many worker threads to run and how many numbers each generates."""

    numbers_per_thread: int
    thread_num: int


def read_config(filename: str | PathLike[str]) -> Config:
    """Parse ``key = value`` lines; both values must end up positive.

    Blank lines are ignored, a later line overrides an earlier one, and any
    other line makes the whole file invalid.
    """
    try:
        with open(filename, encoding="utf-8") as handle:
            lines = handle.readlines()
    except OSError as exc:
        raise ConfigError(f"{messages.FOPEN_ERROR.rstrip()}: {exc.strerror}") from exc

    values = {messages.CONFIG_NUMBERS: 0, messages.CONFIG_THREADS: 0}
    for line in lines:
        if not line.strip():
            continue
        match = _LINE.fullmatch(line)
        if match is None:
            raise ConfigError(f"invalid configuration line: {line.rstrip()!r}")
        values[match["key"]] = int(match["value"])

    config = Config(
        numbers_per_thread=values[messages.CONFIG_NUMBERS],
        thread_num=values[messages.CONFIG_THREADS],
    )
    if config.numbers_per_thread <= 0 or config.thread_num <= 0:
        raise ConfigError(messages.CONFIG_INVALID.rstrip())
    return config