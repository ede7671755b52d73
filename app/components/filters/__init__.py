"""Filter components for the route table.

Usage:
    from app.components.filters import render_filtered_table

    records = load_dataset()
    view = render_filtered_table(records)
"""

from .filter_state import (
    FILTER_STATE_KEY,
    get_filter_state,
    sync_widget_keys,
    validate_filters_against_data,
    widget_keys,
    on_origin_change,
    on_destination_change,
    on_clear,
)

from .filtered_table import (
    render_filtered_table,
    dropdown_options,
    selection_label,
)


__all__ = [
    # State management
    "FILTER_STATE_KEY",
    "get_filter_state",
    "sync_widget_keys",
    "validate_filters_against_data",
    "widget_keys",
    "on_origin_change",
    "on_destination_change",
    "on_clear",
    # Table
    "render_filtered_table",
    "dropdown_options",
    "selection_label",
]
