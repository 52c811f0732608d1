"""cmd.exe command line construction for batch scripts."""

from collections.abc import Mapping, Sequence
from typing import Any, Final

from batspawn.config import DEFAULT_INTERPRETER
from batspawn.models import SpawnPlan
from batspawn.utils.shell import join_cmd_args
from batspawn.utils.validation import validate_command

# Extensions on, autocompletion off, delayed expansion off, skip AutoRun,
# strip one layer of quotes from the /c string
INTERPRETER_FLAGS: Final[tuple[str, ...]] = ("/E:ON", "/F:OFF", "/V:OFF", "/d", "/s", "/c")


def build_batch_command_line(command: str, args: Sequence[str]) -> str:
    """Build the string passed after /c.

    /s strips the outermost pair of quotes, so the escaped tokens get one
    extra pair around them.

    Raises:
        InvalidCommandError: If command contains a double quote
        InvalidArgumentError: If any token contains NUL, CR or LF
    """
    validate_command(command)
    return f'"{join_cmd_args([command, *args])}"'


def build_batch_plan(
    command: str,
    args: Sequence[str],
    options: Mapping[str, Any] | None = None,
    *,
    interpreter: str = DEFAULT_INTERPRETER,
) -> SpawnPlan:
    """Build a plan that runs a batch script through cmd.exe.

    Args:
        command: Batch script name or path
        args: Raw arguments for the script
        options: Caller subprocess options, copied into the plan
        interpreter: Interpreter executable

    Returns:
        SpawnPlan targeting the interpreter with shell disabled and
        verbatim arguments enabled

    Raises:
        InvalidCommandError: If command or interpreter contains a double quote
        InvalidArgumentError: If any argument contains NUL, CR or LF
    """
    validate_command(interpreter)
    line = build_batch_command_line(command, args)
    return SpawnPlan(
        executable=interpreter,
        args=(*INTERPRETER_FLAGS, line),
        options={**(options or {}), "shell": False, "verbatim_arguments": True},
        wrapped=True,
    )
