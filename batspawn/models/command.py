"""Normalized command request."""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from batspawn.utils.validation import validate_options

# str extensions are appended on Windows; False forces PATH-lookup wrapping
Extension = str | bool


def _coerce_args(args: Sequence[str]) -> tuple[str, ...]:
    if isinstance(args, (str, bytes)):
        raise TypeError(f"args must be a sequence of strings, not {type(args).__name__}")
    coerced = tuple(args)
    for arg in coerced:
        if not isinstance(arg, str):
            raise TypeError(f"args must contain only strings, got {arg!r}")
    return coerced


@dataclass(frozen=True)
class CommandSpec:
    """A caller's invocation request in canonical form.

    Build one with the named constructor matching the call shape:

        CommandSpec.from_command("build.bat")
        CommandSpec.from_args("build.bat", ["--release"])
        CommandSpec.from_options("build.bat", {"cwd": "C:\\src"})
        CommandSpec.from_args_and_options("build", ["x"], {}, extension=".cmd")
    """

    command: str
    args: tuple[str, ...] = ()
    options: Mapping[str, Any] = field(default_factory=dict)
    extension: Extension = ""

    # Unhashable: options is a mapping proxy
    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        if not isinstance(self.command, str):
            raise TypeError(f"command must be a string, got {self.command!r}")
        if not isinstance(self.extension, (str, bool)):
            raise TypeError(f"extension must be a string or bool, got {self.extension!r}")
        object.__setattr__(self, "args", _coerce_args(self.args))
        object.__setattr__(self, "options", MappingProxyType(validate_options(self.options)))

    @classmethod
    def from_command(cls, command: str, *, extension: Extension = "") -> "CommandSpec":
        """Shape (command)."""
        return cls(command=command, extension=extension)

    @classmethod
    def from_options(
        cls,
        command: str,
        options: Mapping[str, Any] | None,
        *,
        extension: Extension = "",
    ) -> "CommandSpec":
        """Shape (command, options)."""
        return cls(command=command, options=options or {}, extension=extension)

    @classmethod
    def from_args(
        cls,
        command: str,
        args: Sequence[str],
        *,
        extension: Extension = "",
    ) -> "CommandSpec":
        """Shape (command, args)."""
        return cls(command=command, args=args, extension=extension)

    @classmethod
    def from_args_and_options(
        cls,
        command: str,
        args: Sequence[str],
        options: Mapping[str, Any] | None,
        *,
        extension: Extension = "",
    ) -> "CommandSpec":
        """Shape (command, args, options)."""
        return cls(command=command, args=args, options=options or {}, extension=extension)
