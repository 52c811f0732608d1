"""Argument, command and option validation utilities."""

import re
from collections.abc import Mapping
from typing import Any, Final

from batspawn.errors import (
    InvalidArgumentError,
    InvalidCommandError,
    UnsupportedOptionError,
)

# Characters with no safe representation on a cmd.exe command line
FORBIDDEN_ARG_CHARS: Final[re.Pattern[str]] = re.compile(r"[\0\r\n]")

# Options owned by the batch builder
RESERVED_OPTIONS: Final[tuple[str, ...]] = ("shell", "verbatim_arguments")


def validate_argument(arg: str) -> str:
    """Validate a single raw argument.

    Args:
        arg: Argument to deliver to the target program

    Returns:
        The argument, unchanged

    Raises:
        InvalidArgumentError: If the argument contains NUL, CR or LF
    """
    if FORBIDDEN_ARG_CHARS.search(arg):
        raise InvalidArgumentError(f"Invalid character in argument: {arg!r}")
    return arg


def validate_command(command: str) -> str:
    """Validate an executable name for use inside a quoted command line.

    Args:
        command: Executable name or path

    Returns:
        The command, unchanged

    Raises:
        InvalidCommandError: If the command contains a double quote
    """
    if '"' in command:
        raise InvalidCommandError(f"Invalid character in command: {command!r}")
    return command


def validate_options(options: Mapping[str, Any] | None) -> dict[str, Any]:
    """Validate caller options and return them as a fresh dict.

    The presence of a reserved key is an error whatever its value,
    including None.

    Raises:
        UnsupportedOptionError: If a reserved option is present
    """
    if options is None:
        return {}

    for key in RESERVED_OPTIONS:
        if key in options:
            raise UnsupportedOptionError(f"{key} option is not supported")

    return dict(options)
