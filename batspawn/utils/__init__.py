"""Utilities for batspawn."""

from batspawn.utils.console import ColorfulFormatter, configure_logging
from batspawn.utils.shell import PERCENT_ESCAPE, escape_cmd_arg, join_cmd_args
from batspawn.utils.validation import (
    RESERVED_OPTIONS,
    validate_argument,
    validate_command,
    validate_options,
)

__all__ = [
    "ColorfulFormatter",
    "configure_logging",
    "escape_cmd_arg",
    "join_cmd_args",
    "PERCENT_ESCAPE",
    "RESERVED_OPTIONS",
    "validate_argument",
    "validate_command",
    "validate_options",
]
