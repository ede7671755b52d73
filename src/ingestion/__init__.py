"""Data ingestion module for loading the route sheet."""

from .transformer import rows_to_records, transform_row, header_row, clean_cell
from .sheets import SheetsClient, SheetFetchError, fetch_records

__all__ = [
    # Transform
    "rows_to_records",
    "transform_row",
    "header_row",
    "clean_cell",
    # Sheets
    "SheetsClient",
    "SheetFetchError",
    "fetch_records",
]
