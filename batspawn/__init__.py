"""batspawn: run Windows batch scripts with arguments cmd.exe cannot corrupt."""

from batspawn.errors import (
    BatSpawnError,
    InvalidArgumentError,
    InvalidCommandError,
    UnsupportedOptionError,
)
from batspawn.models import CommandSpec, SpawnPlan
from batspawn.platforms import Platform, detect_platform
from batspawn.services import (
    build_batch_plan,
    check_output,
    get_spawn_plan,
    normalize_call,
    popen,
    run,
    run_async,
)
from batspawn.utils import escape_cmd_arg

__version__ = "0.1.0"

__all__ = [
    "BatSpawnError",
    "build_batch_plan",
    "check_output",
    "CommandSpec",
    "detect_platform",
    "escape_cmd_arg",
    "get_spawn_plan",
    "InvalidArgumentError",
    "InvalidCommandError",
    "normalize_call",
    "Platform",
    "popen",
    "run",
    "run_async",
    "SpawnPlan",
    "UnsupportedOptionError",
]
