"""Command-line argument validation."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from . import messages


class ArgumentError(ValueError):
    """Raised when the command line is malformed."""


class HelpRequested(Exception):
    """Raised when the user asked for the help text."""

    def __init__(self, message: str = messages.HELP_MESSAGE) -> None:
        super().__init__(message)
        self.message = message


def check_argument(arg: str, short_option: str, long_option: str) -> bool:
    """Return whether ``arg`` is either form of an option."""
    return arg in (short_option, long_option)


def validate_file_extension(filename: str) -> bool:
    """Return whether ``filename`` ends in a ``.txt`` extension."""
    dot = filename.rfind(".")
    if dot <= 0:
        return False
    return filename[dot + 1:] == "txt"


def check_args(argv: Sequence[str]) -> str:
    """Validate the arguments (without the program name) and return the config path.

    Announces the chosen file on standard output. Raises HelpRequested for
    ``-h``/``--help`` and ArgumentError for anything malformed.
    """
    if len(argv) == 0 or len(argv) > 2:
        raise ArgumentError(messages.PARAMS_ERROR)

    if len(argv) == 1:
        if check_argument(argv[0], messages.SHORT_HELP, messages.LONG_HELP):
            raise HelpRequested()
        raise ArgumentError(messages.PARAMS_ERROR)

    option, filename = argv
    if not validate_file_extension(filename):
        raise ArgumentError(messages.NAME_ERROR)

    if check_argument(option, messages.SHORT_FILE, messages.LONG_FILE):
        sys.stdout.write(messages.CONFIG_FILE_PATH.format(filename))
        return filename

    raise ArgumentError(messages.PARAMS_ERROR)