"""
CSV export of the employee table.

Lines are plain comma joins with no quoting or escaping. A name or address
containing a comma produces a line with extra columns; this exporter is not a
general CSV encoder.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from empdb.domain.models import CSV_HEADER, Employee
from empdb.storage.abstract import StorageResult, storage_failed, storage_ok
from empdb.utils.logging import get_logger

log = get_logger(__name__)


def export_csv(path: Path | str, records: Iterable[Employee]) -> StorageResult:
    """
    Write a header row and one line per record, in the order given.

    A record that cannot be encoded as UTF-8 fails the export; lines before it
    are already on disk.
    """
    target = Path(path)
    rows = 0
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        with target.open("w", encoding="utf-8", newline="\n") as f:
            f.write(CSV_HEADER + "\n")
            for record in records:
                f.write(record.csv_line() + "\n")
                rows += 1
    except (OSError, UnicodeEncodeError) as exc:
        log.warning("CSV export failed", extra={"path": str(target), "error": str(exc)})
        return storage_failed(str(target), str(exc))

    log.info("CSV exported", extra={"path": str(target), "rows": rows})
    return storage_ok(str(target), rows)


__all__ = ["export_csv"]
