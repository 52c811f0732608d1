"""Turn a CommandSpec into a SpawnPlan."""

import logging

from batspawn.config import Settings
from batspawn.models import CommandSpec, SpawnPlan
from batspawn.platforms import Platform, detect_platform
from batspawn.services.builder import build_batch_plan
from batspawn.services.resolver import apply_extension, needs_shell_wrap
from batspawn.services.state import get_settings

logger = logging.getLogger(__name__)


def resolve_platform(
    platform: Platform | None = None,
    settings: Settings | None = None,
) -> Platform:
    """Pick the target platform.

    Explicit argument first, then the settings override, then the probe.
    """
    if platform is not None:
        return platform
    settings = settings or get_settings()
    if settings.platform is not None:
        return settings.platform
    return detect_platform()


def get_spawn_plan(
    spec: CommandSpec,
    *,
    platform: Platform | None = None,
    settings: Settings | None = None,
) -> SpawnPlan:
    """Compute the executable, arguments and options for a request.

    Nothing is executed; use this to inspect what would be spawned.

    Args:
        spec: Normalized request
        platform: Target platform (defaults to settings override or probe)
        settings: Settings to use instead of the global ones

    Returns:
        A cmd.exe plan for batch scripts, otherwise the request unchanged

    Raises:
        InvalidCommandError: If a batch command contains a double quote
        InvalidArgumentError: If a batch argument contains NUL, CR or LF
    """
    settings = settings or get_settings()
    platform = resolve_platform(platform, settings)
    command = apply_extension(spec.command, spec.extension, platform)

    if not needs_shell_wrap(command, spec.extension, platform):
        logger.debug("Passing %s through unwrapped (platform=%s)", command, platform.value)
        return SpawnPlan(executable=command, args=spec.args, options=spec.options)

    plan = build_batch_plan(
        command,
        spec.args,
        spec.options,
        interpreter=settings.interpreter,
    )
    logger.debug(
        "Wrapping %s in %s %s (args=%d, platform=%s)",
        command,
        plan.executable,
        " ".join(plan.args[:-1]),
        len(spec.args),
        platform.value,
    )
    return plan
