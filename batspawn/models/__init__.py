"""Data models for batspawn."""

from batspawn.models.command import CommandSpec, Extension
from batspawn.models.plan import SpawnPlan

__all__ = [
    "CommandSpec",
    "Extension",
    "SpawnPlan",
]
