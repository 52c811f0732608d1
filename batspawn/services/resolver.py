"""Decide whether a command has to run through cmd.exe."""

from typing import Final

from batspawn.models import Extension
from batspawn.platforms import Platform

# Suffixes CreateProcess hands to cmd.exe
BATCH_SUFFIXES: Final[tuple[str, ...]] = (".bat", ".cmd")


def apply_extension(command: str, extension: Extension, platform: Platform) -> str:
    """Append a string extension to the command on Windows.

    Boolean extensions never change the command name.
    """
    if platform.is_windows and isinstance(extension, str):
        return f"{command}{extension}"
    return command


def is_batch_file(command: str) -> bool:
    """Check for a .bat/.cmd suffix, case-insensitively."""
    return command.lower().endswith(BATCH_SUFFIXES)


def needs_shell_wrap(command: str, extension: Extension, platform: Platform) -> bool:
    """Check whether the command must be wrapped in a cmd.exe invocation.

    Args:
        command: Command name, already extension-augmented
        extension: Extension requested by the caller; False on Windows
            means "resolve via PATH", whose outcome may be a batch file
        platform: Target platform

    Returns:
        True if the command line has to be built for cmd.exe
    """
    if platform.is_windows and extension is False:
        return True
    return is_batch_file(command)
