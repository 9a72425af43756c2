"""
Exception hierarchy for the employee record store.

Lookups never raise: a miss is `None`, an empty list or `False`. These
exceptions cover snapshot decoding and console input only.
"""

from __future__ import annotations


class EmpDBError(Exception):
    """Base class for all empdb errors."""


class SnapshotError(EmpDBError):
    """Raised when a snapshot file cannot be read back into a table."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"{reason}: {path}")
        self.path = path
        self.reason = reason


class SnapshotNotFoundError(SnapshotError):
    """The snapshot file does not exist."""


class SnapshotVersionError(SnapshotError):
    """The snapshot was written with an unsupported format version."""


class SnapshotCorruptError(SnapshotError):
    """The snapshot exists but its contents are unreadable or inconsistent."""


class InvalidInputError(EmpDBError):
    """Raised by the console layer for malformed user input."""


__all__ = [
    "EmpDBError",
    "SnapshotError",
    "SnapshotNotFoundError",
    "SnapshotVersionError",
    "SnapshotCorruptError",
    "InvalidInputError",
]
