"""cmd.exe argument escaping."""

import re

from batspawn.utils.validation import validate_argument

# Backslash runs the C runtime would pair with a following quote
_TRAILING_BACKSLASHES = re.compile(r'\\+(?="|\Z)')

# %cd:~,% always expands to nothing, so the % before it survives alone
PERCENT_ESCAPE = "%%cd:~,%"


def escape_cmd_arg(arg: str) -> str:
    """Escape one argument for a cmd.exe command line.

    The result survives cmd.exe's own parse (quote tracking, operators,
    %var% expansion) and then the target's C runtime argv parse, which
    together reconstruct ``arg`` exactly.

    Args:
        arg: Raw argument

    Returns:
        Quoted, escaped token

    Raises:
        InvalidArgumentError: If arg contains NUL, CR or LF
    """
    validate_argument(arg)
    escaped = _TRAILING_BACKSLASHES.sub(lambda m: m.group(0) * 2, arg)
    escaped = escaped.replace('"', '""')
    escaped = escaped.replace("%", PERCENT_ESCAPE)
    return f'"{escaped}"'


def join_cmd_args(args: list[str]) -> str:
    """Escape and join tokens with single spaces."""
    return " ".join(escape_cmd_arg(arg) for arg in args)
