"""Filtered route table component.

Renders origin and destination dropdowns, a clear button, the count summary
and the filtered rows.
"""

from typing import List, Sequence
import streamlit as st

from config.constants import (
    ALL_DESTINATIONS_LABEL,
    ALL_ORIGINS_LABEL,
    CLEAR_FILTERS_LABEL,
    NO_SELECTION,
)
from src.analysis.route_filter import FilteredTableView, Record

from .filter_state import (
    FILTER_STATE_KEY,
    get_filter_state,
    on_clear,
    on_destination_change,
    on_origin_change,
    sync_widget_keys,
    validate_filters_against_data,
    widget_keys,
)


def selection_label(name: str, selected: str) -> str:
    """Dropdown label, e.g. 'Origin (A)' when a value is selected."""
    return f"{name} ({selected})" if selected else name


def dropdown_options(values: Sequence[str]) -> List[str]:
    """
    Options for a filter dropdown: the empty "All" entry, then the values.

    Blank values are left out; they would render as a second "All" entry.
    """
    return [NO_SELECTION] + [value for value in values if value]


def render_filtered_table(
    records: Sequence[Record],
    key_prefix: str = "route_table",
    state_key: str = FILTER_STATE_KEY,
) -> FilteredTableView:
    """
    Render the filter controls and the filtered table.

    Args:
        records: Dataset to display; read-only.
        key_prefix: Unique prefix for widget keys.
        state_key: Session state key holding the FilterState.

    Returns:
        The view after this run's interactions.
    """
    records = tuple(records)
    view = FilteredTableView(records, get_filter_state(state_key))

    removed = validate_filters_against_data(view)
    if removed:
        st.caption(f"Cleared filters no longer in the data: {', '.join(removed)}")

    sync_widget_keys(view.state, key_prefix)
    origin_key, destination_key = widget_keys(key_prefix)
    callback_args = (records, key_prefix, state_key)

    col1, col2, col3 = st.columns([2, 2, 1], vertical_alignment="bottom")

    with col1:
        st.selectbox(
            selection_label("Origin", view.state.origin),
            options=dropdown_options(view.origin_options),
            format_func=lambda v: v or ALL_ORIGINS_LABEL,
            key=origin_key,
            on_change=on_origin_change,
            args=callback_args,
        )

    with col2:
        st.selectbox(
            selection_label("Destination", view.state.destination),
            options=dropdown_options(view.destination_options),
            format_func=lambda v: v or ALL_DESTINATIONS_LABEL,
            key=destination_key,
            on_change=on_destination_change,
            args=callback_args,
        )

    with col3:
        st.button(
            CLEAR_FILTERS_LABEL,
            key=f"{key_prefix}_clear",
            type="primary" if view.can_clear else "secondary",
            disabled=not view.can_clear,
            on_click=on_clear,
            args=callback_args,
        )

    st.caption(view.summary().text)

    st.dataframe(
        view.to_dataframe(),
        width="stretch",
        hide_index=True,
    )

    return view
