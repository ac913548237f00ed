"""Diffing target languages against the reference and filling the gaps."""

from .engine import SyncEngine, SyncResult, find_missing_keys
from .report import build_missing_keys_table, print_missing_keys_report

__all__ = [
    "SyncEngine",
    "SyncResult",
    "build_missing_keys_table",
    "find_missing_keys",
    "print_missing_keys_report",
]
