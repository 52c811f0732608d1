"""Services for batspawn."""

from batspawn.services.builder import (
    INTERPRETER_FLAGS,
    build_batch_command_line,
    build_batch_plan,
)
from batspawn.services.invoker import (
    check_output,
    popen,
    run,
    run_async,
    to_popen_call,
)
from batspawn.services.normalizer import normalize_call
from batspawn.services.planner import get_spawn_plan, resolve_platform
from batspawn.services.resolver import (
    BATCH_SUFFIXES,
    apply_extension,
    is_batch_file,
    needs_shell_wrap,
)
from batspawn.services.state import get_settings, reset_state, set_settings

__all__ = [
    "apply_extension",
    "BATCH_SUFFIXES",
    "build_batch_command_line",
    "build_batch_plan",
    "check_output",
    "get_settings",
    "get_spawn_plan",
    "INTERPRETER_FLAGS",
    "is_batch_file",
    "needs_shell_wrap",
    "normalize_call",
    "popen",
    "reset_state",
    "resolve_platform",
    "run",
    "run_async",
    "set_settings",
    "to_popen_call",
]
