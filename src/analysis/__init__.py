"""Filtering of sheet records by origin and destination."""

from .route_filter import (
    Record,
    FilterState,
    FilterSummary,
    FilteredTableView,
    unique_origins,
    unique_destinations,
    is_valid_destination,
    filter_records,
)

__all__ = [
    "Record",
    "FilterState",
    "FilterSummary",
    "FilteredTableView",
    "unique_origins",
    "unique_destinations",
    "is_valid_destination",
    "filter_records",
]
