"""Transform raw sheet rows into records."""

from typing import Any, List, Sequence
from pathlib import Path
import sys

PROJECT_ROOT = Path(__file__).parent.parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from config.constants import SHEET_COLUMNS
from config.logging_config import get_logger
from src.analysis.route_filter import Record

logger = get_logger("transformer")


def clean_cell(value: Any) -> str:
    """Convert a sheet cell to a string; missing cells become empty."""
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def is_blank_row(row: Sequence[Any]) -> bool:
    """True when a row has no non-blank cell."""
    return all(not clean_cell(cell).strip() for cell in row)


def header_row(rows: Sequence[Sequence[Any]]) -> List[str]:
    """Return the header row, or an empty list for an empty sheet."""
    if not rows:
        return []
    return [clean_cell(cell) for cell in rows[0]]


def transform_row(row: Sequence[Any]) -> Record:
    """
    Map one sheet row to a record by column position.

    The values API drops trailing empty cells, so short rows are padded.
    Cells beyond the third column are ignored.
    """
    cells = [clean_cell(cell) for cell in row[:len(SHEET_COLUMNS)]]
    cells += [""] * (len(SHEET_COLUMNS) - len(cells))
    return Record(**dict(zip(SHEET_COLUMNS, cells)))


def rows_to_records(rows: Sequence[Sequence[Any]]) -> List[Record]:
    """
    Convert sheet rows to records.

    Args:
        rows: Raw rows as returned by the values API; the first row is the header.

    Returns:
        Records in sheet order, blank rows dropped.
    """
    if not rows:
        return []

    records = []
    skipped = 0
    for row in rows[1:]:
        if is_blank_row(row):
            skipped += 1
            continue
        records.append(transform_row(row))

    if skipped:
        logger.debug(f"Skipped {skipped} blank rows")
    logger.info(f"Transformed {len(records)} rows (header: {header_row(rows)})")
    return records
