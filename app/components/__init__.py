"""Reusable UI components for Route Sheet Viewer."""

from .filters import (
    get_filter_state,
    render_filtered_table,
)

__all__ = [
    "get_filter_state",
    "render_filtered_table",
]
