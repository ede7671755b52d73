"""Origin/destination filtering for sheet records.

Holds the record model, the two-field filter state and the
``FilteredTableView`` that derives option lists, filtered rows and the count
summary from a fixed dataset. Everything here is pure in-memory work; no
operation can fail.
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence
from pathlib import Path
import sys

import pandas as pd

PROJECT_ROOT = Path(__file__).parent.parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from config.constants import (
    NO_SELECTION,
    SHEET_COLUMNS,
    SUMMARY_SEPARATOR,
    get_column_label,
)
from config.logging_config import get_logger

logger = get_logger("route_filter")


@dataclass(frozen=True)
class Record:
    """One sheet row."""

    origin: str
    destination: str
    value: str


@dataclass
class FilterState:
    """Currently selected origin and destination. Empty means unconstrained."""

    origin: str = NO_SELECTION
    destination: str = NO_SELECTION

    @property
    def is_empty(self) -> bool:
        """Check if no filter is active (showing all data)."""
        return not self.origin and not self.destination


@dataclass(frozen=True)
class FilterSummary:
    """Counts and active constraints, for display only."""

    shown: int
    total: int
    origin: str = NO_SELECTION
    destination: str = NO_SELECTION

    @property
    def text(self) -> str:
        """Human-readable summary, e.g. 'Showing 2 of 3 entries • Origin: A'."""
        text = f"Showing {self.shown} of {self.total} entries"
        if self.origin:
            text += f"{SUMMARY_SEPARATOR}Origin: {self.origin}"
        if self.destination:
            text += f"{SUMMARY_SEPARATOR}Destination: {self.destination}"
        return text

    def __str__(self) -> str:
        return self.text


def unique_origins(records: Iterable[Record]) -> List[str]:
    """Sorted distinct origins across all records."""
    return sorted({record.origin for record in records})


def unique_destinations(records: Iterable[Record], origin: str = NO_SELECTION) -> List[str]:
    """
    Sorted distinct destinations, optionally limited to one origin.

    Args:
        records: Dataset to scan.
        origin: Only consider records with this origin. Empty means all.

    Returns:
        Sorted list of destinations.
    """
    return sorted({
        record.destination
        for record in records
        if not origin or record.origin == origin
    })


def is_valid_destination(records: Iterable[Record], origin: str, destination: str) -> bool:
    """Check whether a destination can stay selected under the given origin."""
    if not origin or not destination:
        return True
    return any(
        record.origin == origin and record.destination == destination
        for record in records
    )


def filter_records(records: Iterable[Record], state: FilterState) -> List[Record]:
    """Keep records matching both constraints, preserving dataset order."""
    return [
        record for record in records
        if (not state.origin or record.origin == state.origin)
        and (not state.destination or record.destination == state.destination)
    ]


class FilteredTableView:
    """
    Filter view over a fixed dataset.

    The dataset is read-only and may be replaced between renders; the filter
    state is the only mutable part and is owned by the view (the caller may
    pass in a stored instance to keep it across reruns).
    """

    def __init__(self, records: Sequence[Record], state: Optional[FilterState] = None):
        self.records = tuple(records)
        self.state = state if state is not None else FilterState()

    @property
    def origin_options(self) -> List[str]:
        return unique_origins(self.records)

    @property
    def destination_options(self) -> List[str]:
        return unique_destinations(self.records, self.state.origin)

    @property
    def filtered_records(self) -> List[Record]:
        return filter_records(self.records, self.state)

    @property
    def can_clear(self) -> bool:
        """True when at least one filter is active."""
        return not self.state.is_empty

    def set_origin(self, new_origin: str) -> FilterState:
        """
        Select an origin, dropping the destination if the new origin never
        leads to it.

        Args:
            new_origin: Origin to select. Empty clears the origin constraint
                and keeps any selected destination.

        Returns:
            The updated FilterState.
        """
        new_origin = new_origin or NO_SELECTION
        self.state.origin = new_origin

        if not is_valid_destination(self.records, new_origin, self.state.destination):
            logger.debug(
                f"Destination {self.state.destination!r} not reachable from "
                f"{new_origin!r}; clearing it"
            )
            self.state.destination = NO_SELECTION

        return self.state

    def set_destination(self, new_destination: str) -> FilterState:
        """Select a destination. Never affects the origin."""
        self.state.destination = new_destination or NO_SELECTION
        return self.state

    def clear_filters(self) -> FilterState:
        """Reset both filters."""
        self.state.origin = NO_SELECTION
        self.state.destination = NO_SELECTION
        return self.state

    def summary(self) -> FilterSummary:
        """Count of filtered rows against the dataset size."""
        return FilterSummary(
            shown=len(self.filtered_records),
            total=len(self.records),
            origin=self.state.origin,
            destination=self.state.destination,
        )

    def to_dataframe(self) -> pd.DataFrame:
        """Filtered rows as a DataFrame with display headers."""
        columns = [get_column_label(name) for name in SHEET_COLUMNS]
        rows = [
            [getattr(record, name) for name in SHEET_COLUMNS]
            for record in self.filtered_records
        ]
        return pd.DataFrame(rows, columns=columns)
