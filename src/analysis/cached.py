"""Cached data loading for Streamlit.

The sheet is fetched once per TTL window and shared by all sessions.
Records are returned as a tuple so the cached value is immutable.
"""

from typing import Optional, Tuple
from pathlib import Path
import sys

import streamlit as st

PROJECT_ROOT = Path(__file__).parent.parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from config import config
from src.analysis.route_filter import Record
from src.ingestion.sheets import fetch_records


@st.cache_data(ttl=config.app.cache_ttl, show_spinner="Loading sheet data...")
def load_dataset(range_name: Optional[str] = None) -> Tuple[Record, ...]:
    """Fetch and cache the route records. Failures are not cached."""
    return tuple(fetch_records(range_name=range_name))


def clear_dataset_cache() -> None:
    """Drop the cached sheet so the next load refetches it."""
    load_dataset.clear()
