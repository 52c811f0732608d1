"""Positional call-shape normalization.

Maps the loose positional forms callers are used to onto the named
CommandSpec constructors:

    (command)
    (command, options)
    (command, args)
    (command, args, options)
    (command, extension, ...)   any of the above after an extension
"""

from collections.abc import Mapping, Sequence
from typing import Any

from batspawn.models import CommandSpec


def _is_args(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


def normalize_call(command: str, *rest: Any) -> CommandSpec:
    """Normalize a positional invocation into a CommandSpec.

    A str or bool right after the command is an extension; a sequence of
    strings is args; a mapping (or None) is options.

    Raises:
        TypeError: If the positional values match no supported shape
        UnsupportedOptionError: If options override shell or verbatim arguments
    """
    remaining = list(rest)
    extension: str | bool = ""

    if remaining and isinstance(remaining[0], (str, bool)):
        extension = remaining.pop(0)

    if len(remaining) > 2:
        raise TypeError(f"Too many positional arguments for {command!r}")

    if not remaining:
        return CommandSpec.from_command(command, extension=extension)

    first = remaining[0]
    if len(remaining) == 1:
        if _is_args(first):
            return CommandSpec.from_args(command, first, extension=extension)
        if first is None or isinstance(first, Mapping):
            return CommandSpec.from_options(command, first, extension=extension)
        raise TypeError(f"Expected args or options, got {type(first).__name__}")

    second = remaining[1]
    if not _is_args(first):
        raise TypeError(f"Expected args, got {type(first).__name__}")
    if second is not None and not isinstance(second, Mapping):
        raise TypeError(f"Expected options, got {type(second).__name__}")
    return CommandSpec.from_args_and_options(command, first, second, extension=extension)
