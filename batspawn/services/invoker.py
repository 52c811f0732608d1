"""Process creation for spawn plans.

Each entry point builds the plan first, so validation errors are raised
before anything is executed. Failures from subprocess itself
(FileNotFoundError, CalledProcessError, TimeoutExpired) propagate unchanged.
"""

import asyncio
import logging
import subprocess
from typing import Any

from batspawn.config import Settings
from batspawn.models import CommandSpec, SpawnPlan
from batspawn.platforms import Platform
from batspawn.services.planner import get_spawn_plan, resolve_platform

logger = logging.getLogger(__name__)


def to_popen_call(plan: SpawnPlan, platform: Platform) -> tuple[str | list[str], dict[str, Any]]:
    """Translate a plan into subprocess positional args and keyword args.

    On Windows a string args value is used as the command line as-is,
    which is how verbatim arguments reach CreateProcess. Everywhere else
    argv is already delivered untouched, so a list is used.

    Returns:
        Tuple of (args, kwargs) for subprocess.Popen and friends
    """
    kwargs = dict(plan.options)
    verbatim = bool(kwargs.pop("verbatim_arguments", False))

    if verbatim and platform.is_windows:
        return plan.command_line, kwargs
    return plan.argv, kwargs


def _prepare(
    spec: CommandSpec,
    platform: Platform | None,
    settings: Settings | None,
) -> tuple[str | list[str], dict[str, Any]]:
    platform = resolve_platform(platform, settings)
    plan = get_spawn_plan(spec, platform=platform, settings=settings)
    args, kwargs = to_popen_call(plan, platform)
    logger.debug("Spawning %s (wrapped=%s)", plan.executable, plan.wrapped)
    return args, kwargs


def popen(
    spec: CommandSpec,
    *,
    platform: Platform | None = None,
    settings: Settings | None = None,
) -> subprocess.Popen:
    """Start the process without waiting for it."""
    args, kwargs = _prepare(spec, platform, settings)
    return subprocess.Popen(args, **kwargs)


def run(
    spec: CommandSpec,
    *,
    platform: Platform | None = None,
    settings: Settings | None = None,
) -> subprocess.CompletedProcess:
    """Run the process to completion.

    Options such as capture_output, check, text and timeout come from
    spec.options and are forwarded to subprocess.run.
    """
    args, kwargs = _prepare(spec, platform, settings)
    return subprocess.run(args, **kwargs)


def check_output(
    spec: CommandSpec,
    *,
    platform: Platform | None = None,
    settings: Settings | None = None,
) -> bytes | str:
    """Run the process and return its stdout.

    Raises:
        subprocess.CalledProcessError: If the process exits non-zero
    """
    args, kwargs = _prepare(spec, platform, settings)
    return subprocess.check_output(args, **kwargs)


async def run_async(
    spec: CommandSpec,
    *,
    platform: Platform | None = None,
    settings: Settings | None = None,
) -> subprocess.CompletedProcess:
    """Run the process to completion without blocking the event loop.

    Accepts the same run-style options as run (capture_output, check,
    input, timeout). The process is started with subprocess.Popen and
    waited on in a worker thread, because asyncio's subprocess transport
    always re-quotes a list of arguments on Windows and so cannot carry a
    verbatim command line. If the awaiting task is cancelled or the
    timeout expires, the child is killed.

    Raises:
        subprocess.CalledProcessError: If check is set and the process
            exits non-zero
        subprocess.TimeoutExpired: If the timeout expires
    """
    args, kwargs = _prepare(spec, platform, settings)
    check = kwargs.pop("check", False)
    timeout = kwargs.pop("timeout", None)
    stdin_data = kwargs.pop("input", None)

    if kwargs.pop("capture_output", False):
        if "stdout" in kwargs or "stderr" in kwargs:
            raise ValueError("stdout and stderr arguments may not be used with capture_output.")
        kwargs["stdout"] = subprocess.PIPE
        kwargs["stderr"] = subprocess.PIPE
    if stdin_data is not None:
        if "stdin" in kwargs:
            raise ValueError("stdin and input arguments may not both be used.")
        kwargs["stdin"] = subprocess.PIPE

    process = subprocess.Popen(args, **kwargs)
    try:
        stdout, stderr = await asyncio.to_thread(process.communicate, stdin_data, timeout)
    except asyncio.CancelledError:
        logger.debug("Cancelled, killing %s (pid=%s)", process.args, process.pid)
        process.kill()
        raise
    except subprocess.TimeoutExpired:
        process.kill()
        await asyncio.to_thread(process.wait)
        raise

    if check and process.returncode:
        raise subprocess.CalledProcessError(
            process.returncode, process.args, output=stdout, stderr=stderr
        )
    return subprocess.CompletedProcess(process.args, process.returncode, stdout, stderr)
