"""
Whole-table snapshot codec.

A snapshot is a single JSON document holding every record and the table's
next-id counter:

    {"format_version": 1, "next_id": 4, "records": [{"id": 1, ...}, ...]}

The file is written in one blocking call that overwrites the target. There is
no temp-file-then-rename step, so a crash mid-write can leave a truncated file;
`read_snapshot` reports that as a corrupt snapshot.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable, List

from pydantic import BaseModel, Field, ValidationError, model_validator
from pydantic_core import PydanticSerializationError

from empdb.domain.models import Employee
from empdb.exceptions import (
    SnapshotCorruptError,
    SnapshotError,
    SnapshotNotFoundError,
    SnapshotVersionError,
)
from empdb.storage.abstract import StorageResult, storage_failed, storage_ok
from empdb.utils.logging import get_logger

FORMAT_VERSION = 1

log = get_logger(__name__)


class TableSnapshot(BaseModel):
    """
    Serialized form of a table: records in table order plus the id counter.
    """

    format_version: int = Field(FORMAT_VERSION, description="Snapshot layout version.")
    next_id: int = Field(..., ge=1, description="Id the table will assign next.")
    records: List[Employee] = Field(default_factory=list)

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _check_identity(self) -> "TableSnapshot":
        ids = [record.id for record in self.records]
        if len(ids) != len(set(ids)):
            raise ValueError("duplicate record ids")
        if ids and self.next_id <= max(ids):
            raise ValueError(f"next_id {self.next_id} does not exceed max id {max(ids)}")
        return self


def write_snapshot(path: Path | str, records: Iterable[Employee], next_id: int) -> StorageResult:
    """
    Serialize records and counter to `path`, overwriting any existing file.

    Returns
    -------
    StorageResult
        `ok=False` with the error text if the file could not be written or a
        record cannot be encoded as UTF-8.
    """
    target = Path(path)
    snapshot = TableSnapshot(next_id=next_id, records=list(records))
    try:
        # Serialize first so an unencodable record leaves the old file intact.
        document = snapshot.model_dump_json(indent=2)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(document, encoding="utf-8")
    except (OSError, ValueError, PydanticSerializationError) as exc:
        log.warning("Snapshot write failed", extra={"path": str(target), "error": str(exc)})
        return storage_failed(str(target), str(exc))

    log.info(
        "Snapshot stored",
        extra={"path": str(target), "rows": len(snapshot.records), "next_id": next_id},
    )
    return storage_ok(str(target), len(snapshot.records))


def read_snapshot(path: Path | str) -> TableSnapshot:
    """
    Load and validate a snapshot written by `write_snapshot`.

    Raises
    ------
    SnapshotNotFoundError
        The file does not exist.
    SnapshotVersionError
        The file declares a format version this code cannot read.
    SnapshotCorruptError
        The file is not valid JSON or fails record/counter validation.
    SnapshotError
        The file exists but cannot be opened.
    """
    source = Path(path)
    try:
        raw = source.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise SnapshotNotFoundError(str(source), "snapshot not found") from exc
    except UnicodeDecodeError as exc:
        raise SnapshotCorruptError(str(source), "snapshot is not UTF-8 text") from exc
    except OSError as exc:
        raise SnapshotError(str(source), f"snapshot unreadable ({exc.strerror})") from exc

    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise SnapshotCorruptError(str(source), f"invalid JSON ({exc.msg})") from exc
    except RecursionError as exc:
        raise SnapshotCorruptError(str(source), "JSON nested too deeply") from exc
    if not isinstance(payload, dict):
        raise SnapshotCorruptError(str(source), "snapshot root is not an object")

    version = payload.get("format_version")
    if version != FORMAT_VERSION:
        raise SnapshotVersionError(
            str(source), f"unsupported snapshot version {version!r} (expected {FORMAT_VERSION})"
        )

    try:
        return TableSnapshot.model_validate(payload)
    except ValidationError as exc:
        raise SnapshotCorruptError(
            str(source), f"invalid snapshot contents ({exc.error_count()} errors)"
        ) from exc


__all__ = ["FORMAT_VERSION", "TableSnapshot", "read_snapshot", "write_snapshot"]
