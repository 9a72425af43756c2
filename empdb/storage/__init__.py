"""
Storage package for the employee record store.

Centralizes file I/O: whole-table snapshots and CSV export. Keep this layer
focused on encoding and files, decoupled from table semantics.
"""

from empdb.storage.abstract import StorageResult
from empdb.storage.csv_export import export_csv
from empdb.storage.snapshot import FORMAT_VERSION, TableSnapshot, read_snapshot, write_snapshot

__all__ = [
    "FORMAT_VERSION",
    "StorageResult",
    "TableSnapshot",
    "export_csv",
    "read_snapshot",
    "write_snapshot",
]
