"""Exceptions raised while building a spawn plan."""


class BatSpawnError(ValueError):
    """Base class for requests that cannot be made safe."""

    pass


class InvalidArgumentError(BatSpawnError):
    """Argument contains a character cmd.exe cannot carry (NUL, CR, LF)."""

    pass


class InvalidCommandError(BatSpawnError):
    """Executable name contains a double quote."""

    pass


class UnsupportedOptionError(BatSpawnError):
    """Caller tried to override shell selection or verbatim arguments."""

    pass
