"""Write versioned metadata entries to TSV/CSV files."""

import csv
import io
from typing import Dict, Iterator, TextIO

from staramr_updater.models import PipelineMetadataEntry

OUTPUT_COLUMNS = ["key", "value", "type"]

Entries = Dict[str, PipelineMetadataEntry]


def write_tsv(entries: Entries, filepath: str) -> None:
    _write(entries, filepath, delimiter="\t")


def write_csv(entries: Entries, filepath: str) -> None:
    _write(entries, filepath, delimiter=",")


def _write(entries: Entries, filepath: str, delimiter: str) -> None:
    with open(filepath, "w", newline="", encoding="utf-8") as fh:
        _write_rows(entries, fh, delimiter)


def entries_to_bytes(entries: Entries, fmt: str = "tsv") -> bytes:
    """Serialize entries to bytes (for writing to stdout)."""
    buf = io.StringIO()
    _write_rows(entries, buf, "\t" if fmt == "tsv" else ",")
    return buf.getvalue().encode("utf-8")


def _write_rows(entries: Entries, fh: TextIO, delimiter: str) -> None:
    writer = csv.DictWriter(fh, fieldnames=OUTPUT_COLUMNS, delimiter=delimiter)
    writer.writeheader()
    for row in _rows(entries):
        writer.writerow(row)


def _rows(entries: Entries) -> Iterator[dict]:
    for key in sorted(entries):
        entry = entries[key]
        yield {"key": key, "value": entry.value, "type": entry.type}
