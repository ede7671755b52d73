"""Display constants for Route Sheet Viewer."""

from typing import Dict, List

# Empty selection means "no constraint on this field"
NO_SELECTION = ""

ALL_ORIGINS_LABEL = "All Origins"
ALL_DESTINATIONS_LABEL = "All Destinations"
CLEAR_FILTERS_LABEL = "Clear Filters"

# Separator between the count and the active filter parts of the summary
SUMMARY_SEPARATOR = " • "

# Sheet column position -> record field
SHEET_COLUMNS: List[str] = ["origin", "destination", "value"]

# Record field -> table header
TABLE_COLUMN_LABELS: Dict[str, str] = {
    "origin": "Origin",
    "destination": "Destination",
    "value": "Value",
}

ERROR_TITLE = "Error Loading Data"
ERROR_MESSAGE = "Please check your sheet configuration and try again."
EMPTY_MESSAGE = "The sheet has no rows to display."


def get_column_label(field_name: str) -> str:
    """Get the table header for a record field."""
    return TABLE_COLUMN_LABELS.get(field_name, field_name.replace("_", " ").title())
