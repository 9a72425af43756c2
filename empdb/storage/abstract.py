"""
Result contract shared by the file-based storage operations.

Snapshot and CSV export never raise for I/O failures. They return a
StorageResult the caller can branch on instead.
"""

from __future__ import annotations

from typing import Optional, TypedDict


class StorageResult(TypedDict, total=False):
    """
    Outcome of a snapshot write or CSV export.

    `ok` is always present. `error` is set only on failure.
    """

    ok: bool
    path: str
    rows: int
    error: Optional[str]


def storage_ok(path: str, rows: int) -> StorageResult:
    return StorageResult(ok=True, path=path, rows=rows, error=None)


def storage_failed(path: str, error: str) -> StorageResult:
    return StorageResult(ok=False, path=path, rows=0, error=error)


__all__ = ["StorageResult", "storage_ok", "storage_failed"]
