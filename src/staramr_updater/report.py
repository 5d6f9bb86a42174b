"""Read the staramr summary report (summary.tsv) for a single isolate.

The report is a header row and exactly one data row, both with
``SUMMARY_COLUMN_COUNT`` tab-separated fields. Field text is returned as-is;
nothing is trimmed or converted.
"""

import logging
from pathlib import Path
from typing import List, Optional, TextIO, Union

from staramr_updater.exceptions import ReportIOError, SchemaError
from staramr_updater.models import SUMMARY_COLUMN_COUNT, AMRResult

logger = logging.getLogger(__name__)


def read_summary(path: Union[str, Path]) -> AMRResult:
    """Parse a staramr summary report into an AMRResult.

    Raises SchemaError for a wrong column count, a missing data row or more
    than one data row, and ReportIOError when the file cannot be read.
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as fh:
            return _parse(fh, path)
    except UnicodeDecodeError as exc:
        raise ReportIOError(f"Could not decode staramr results file [{path}]: {exc}") from exc
    except OSError as exc:
        raise ReportIOError(f"Could not read staramr results file [{path}]: {exc}") from exc


def _parse(fh: TextIO, path: Path) -> AMRResult:
    header = _next_line(fh)
    if header is None:
        raise SchemaError(f"Empty staramr results file [{path}]")
    _check_width(split_row(header), path, "columns")

    data = _next_line(fh)
    if data is None:
        raise SchemaError(
            f"No results in staramr results file [{path}], expected exactly one line of results"
        )
    tokens = split_row(data)
    _check_width(tokens, path, "fields in results row")
    logger.debug("Read staramr results row from %s: %s", path, tokens)

    # Blank lines may trail the data row; any other line is a second result
    if any(line.rstrip("\r\n") for line in fh):
        raise SchemaError(
            f"Invalid number of results in staramr results file [{path}], "
            "expected only one line of results but got multiple lines"
        )

    return AMRResult.from_row(tokens)


def split_row(line: str) -> List[str]:
    """Split one report line on tabs, keeping empty fields."""
    return line.split("\t")


def _next_line(fh: TextIO) -> Optional[str]:
    # None at end of file; "" for a blank line
    line = fh.readline()
    if not line:
        return None
    return line.rstrip("\r\n")


def _check_width(tokens: List[str], path: Path, what: str) -> None:
    if len(tokens) != SUMMARY_COLUMN_COUNT:
        raise SchemaError(
            f"Invalid number of {what} in staramr results file [{path}], "
            f"expected [{SUMMARY_COLUMN_COUNT}] got [{len(tokens)}]"
        )
