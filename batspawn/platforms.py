"""Platform identity used to decide whether cmd.exe wrapping applies."""

import sys
from enum import Enum


class Platform(str, Enum):
    WINDOWS = "win32"
    POSIX = "posix"

    @property
    def is_windows(self) -> bool:
        return self is Platform.WINDOWS


def detect_platform() -> Platform:
    """Probe the running interpreter's platform."""
    if sys.platform == "win32":
        return Platform.WINDOWS
    return Platform.POSIX


def parse_platform(value: str) -> Platform | None:
    """Parse a platform name, returning None when unrecognized.

    Accepts the enum values plus the common aliases "windows" and "nt".
    """
    value = value.strip().lower()
    if value in ("win32", "windows", "nt"):
        return Platform.WINDOWS
    if value == "posix":
        return Platform.POSIX
    return None
