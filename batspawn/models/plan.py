"""Spawn plan handed to the process-creation primitive."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any


@dataclass(frozen=True)
class SpawnPlan:
    """Final executable, arguments and options for one process.

    Immutable once built: args is a tuple and options a read-only mapping.
    """

    executable: str
    args: tuple[str, ...] = ()
    options: Mapping[str, Any] = field(default_factory=dict)
    wrapped: bool = False

    # Unhashable: options is a mapping proxy
    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        object.__setattr__(self, "args", tuple(self.args))
        object.__setattr__(self, "options", MappingProxyType(dict(self.options)))

    @property
    def argv(self) -> list[str]:
        """Executable followed by its arguments."""
        return [self.executable, *self.args]

    @property
    def verbatim(self) -> bool:
        """Whether args must reach the child without extra quoting."""
        return bool(self.options.get("verbatim_arguments", False))

    @property
    def command_line(self) -> str:
        """Quoted executable followed by args joined with single spaces.

        Only the executable is quoted, so a path with spaces cannot be
        split by CreateProcess. Args are appended exactly as stored.
        """
        return " ".join([f'"{self.executable}"', *self.args])
