"""Run configuration."""

from .schema import SyncConfig

__all__ = ["SyncConfig"]
