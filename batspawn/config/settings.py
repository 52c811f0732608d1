"""Settings from environment variables.

Centralized environment variable parsing and validation.
"""

import logging
import os
from dataclasses import dataclass, field

from batspawn.platforms import Platform, parse_platform

logger = logging.getLogger(__name__)

DEFAULT_INTERPRETER = "cmd.exe"


@dataclass
class Settings:
    """batspawn settings.

    Handles parsing, validation, and defaults for all env vars.
    """

    # Interpreter used to run batch scripts
    interpreter: str = field(default=DEFAULT_INTERPRETER)

    # Overrides the sys.platform probe when set
    platform: Platform | None = field(default=None)

    # Logging
    log_level: str = field(default="WARNING")
    log_colors: bool = field(default=True)

    @classmethod
    def from_env(cls) -> "Settings":
        """Load settings from BATSPAWN_* environment variables.

        Returns:
            Settings instance with values from environment
        """
        return cls(
            interpreter=cls._get_interpreter(),
            platform=cls._get_platform(),
            log_level=os.getenv("BATSPAWN_LOG_LEVEL", "WARNING").upper(),
            log_colors=cls._get_bool("BATSPAWN_LOG_COLORS", True),
        )

    @staticmethod
    def _get_bool(key: str, default: bool) -> bool:
        """Get boolean from environment.

        Args:
            key: Environment variable key
            default: Default value if not set

        Returns:
            Boolean value from environment or default
        """
        value = os.getenv(key)
        if value is None:
            return default
        return value.lower() in ("1", "true", "yes", "on")

    @staticmethod
    def _get_interpreter() -> str:
        """Get interpreter from environment, rejecting quoted values."""
        value = os.getenv("BATSPAWN_INTERPRETER", "").strip()
        if not value:
            return DEFAULT_INTERPRETER
        if '"' in value:
            logger.warning(
                "Invalid BATSPAWN_INTERPRETER %r, using default %s",
                value,
                DEFAULT_INTERPRETER,
            )
            return DEFAULT_INTERPRETER
        return value

    @staticmethod
    def _get_platform() -> Platform | None:
        """Get platform override from environment.

        Returns:
            Platform, or None to use the runtime probe
        """
        value = os.getenv("BATSPAWN_PLATFORM")
        if not value:
            return None

        platform = parse_platform(value)
        if platform is None:
            logger.warning("Unknown BATSPAWN_PLATFORM %r, probing instead", value)
        return platform
