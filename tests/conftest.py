"""Pytest configuration and fixtures for Route Sheet Viewer tests."""

import pytest
from unittest.mock import MagicMock

from src.analysis.route_filter import Record


@pytest.fixture
def sample_records():
    """Three-row dataset: two rows from A, one from B."""
    return [
        Record("A", "X", "1"),
        Record("A", "Y", "2"),
        Record("B", "X", "3"),
    ]


@pytest.fixture
def route_records():
    """Larger dataset with repeated origins and destinations out of order."""
    return [
        Record("Lisbon", "Madrid", "120"),
        Record("Berlin", "Paris", "95"),
        Record("Lisbon", "Paris", "180"),
        Record("Berlin", "Madrid", "210"),
        Record("Amsterdam", "Paris", "60"),
        Record("Lisbon", "Madrid", "115"),
        Record("Berlin", "Warsaw", "75"),
    ]


@pytest.fixture
def sheet_rows():
    """Raw values API rows, header first."""
    return [
        ["Origin", "Destination", "Value"],
        ["A", "X", "1"],
        ["A", "Y", "2"],
        ["B", "X", "3"],
    ]


@pytest.fixture
def session_state(monkeypatch):
    """Replace Streamlit session state with a plain dict."""
    import streamlit as st

    state = {}
    monkeypatch.setattr(st, "session_state", state)
    return state


@pytest.fixture
def mock_response():
    """Build a fake requests response."""

    def _make(payload=None, status_code=200, raise_error=None):
        response = MagicMock()
        response.status_code = status_code
        response.json.return_value = payload if payload is not None else {}
        if raise_error is not None:
            response.raise_for_status.side_effect = raise_error
        else:
            response.raise_for_status.return_value = None
        return response

    return _make
