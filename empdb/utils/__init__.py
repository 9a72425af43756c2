"""
Utilities package for the employee record store.

Exports shared helpers for logging and profiling. Keep this package
lightweight and free of table logic.
"""

from empdb.utils.logging import configure_logging, get_logger
from empdb.utils.profiler import ProfileStats, profile_block

__all__ = [
    "configure_logging",
    "get_logger",
    "ProfileStats",
    "profile_block",
]
