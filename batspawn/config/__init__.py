"""Configuration module for batspawn."""

from batspawn.config.settings import DEFAULT_INTERPRETER, Settings

__all__ = ["DEFAULT_INTERPRETER", "Settings"]
