"""Filter state management for the route table.

Streamlit reruns the page script on every interaction, so the FilterState is
kept in session state and the dropdown widgets are driven from it. Widget
callbacks route each event through ``FilteredTableView`` so the destination
reset on origin change happens in one place.
"""

from typing import List, Sequence, Tuple
import streamlit as st

from config.constants import NO_SELECTION
from config.logging_config import get_logger
from src.analysis.route_filter import FilteredTableView, FilterState, Record

logger = get_logger("filter_state")

# Session state key for filter state
FILTER_STATE_KEY = "route_filter_state"


def get_filter_state(state_key: str = FILTER_STATE_KEY) -> FilterState:
    """
    Get the current filter state from session state.

    Args:
        state_key: Session state key holding the FilterState.

    Returns:
        Current FilterState, initialized empty if not set.
    """
    if state_key not in st.session_state:
        st.session_state[state_key] = FilterState()
    return st.session_state[state_key]


def widget_keys(key_prefix: str) -> Tuple[str, str]:
    """Session state keys of the origin and destination dropdowns."""
    return f"{key_prefix}_origin", f"{key_prefix}_destination"


def sync_widget_keys(state: FilterState, key_prefix: str) -> None:
    """
    Push the filter state into the dropdown widget keys.

    Must run before the widgets are created in the current script run.
    """
    origin_key, destination_key = widget_keys(key_prefix)
    st.session_state[origin_key] = state.origin
    st.session_state[destination_key] = state.destination


def validate_filters_against_data(view: FilteredTableView) -> List[str]:
    """
    Drop selections that no longer exist in the dataset.

    The cached dataset can be refreshed between reruns; a stored origin or
    destination missing from the new option lists would not be selectable.

    Args:
        view: View wrapping the current dataset and stored state.

    Returns:
        Descriptions of the removed selections.
    """
    removed = []

    if view.state.origin and view.state.origin not in view.origin_options:
        removed.append(f"Origin: {view.state.origin}")
        view.set_origin(NO_SELECTION)

    if view.state.destination and view.state.destination not in view.destination_options:
        removed.append(f"Destination: {view.state.destination}")
        view.set_destination(NO_SELECTION)

    if removed:
        logger.info(f"Dropped stale filters: {', '.join(removed)}")

    return removed


def on_origin_change(
    records: Sequence[Record],
    key_prefix: str,
    state_key: str = FILTER_STATE_KEY,
) -> None:
    """Origin dropdown callback."""
    origin_key, destination_key = widget_keys(key_prefix)
    view = FilteredTableView(records, get_filter_state(state_key))
    state = view.set_origin(st.session_state.get(origin_key, NO_SELECTION))

    # The destination may have been reset; keep its widget in step
    st.session_state[destination_key] = state.destination
    st.session_state[state_key] = state


def on_destination_change(
    records: Sequence[Record],
    key_prefix: str,
    state_key: str = FILTER_STATE_KEY,
) -> None:
    """Destination dropdown callback."""
    _, destination_key = widget_keys(key_prefix)
    view = FilteredTableView(records, get_filter_state(state_key))
    st.session_state[state_key] = view.set_destination(
        st.session_state.get(destination_key, NO_SELECTION)
    )


def on_clear(
    records: Sequence[Record],
    key_prefix: str,
    state_key: str = FILTER_STATE_KEY,
) -> None:
    """Clear button callback."""
    view = FilteredTableView(records, get_filter_state(state_key))
    state = view.clear_filters()
    sync_widget_keys(state, key_prefix)
    st.session_state[state_key] = state
