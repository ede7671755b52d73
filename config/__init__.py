"""Configuration module for Route Sheet Viewer."""

from .settings import config, SheetsConfig, AppConfig, Config
from .constants import (
    NO_SELECTION,
    ALL_ORIGINS_LABEL,
    ALL_DESTINATIONS_LABEL,
    CLEAR_FILTERS_LABEL,
    SUMMARY_SEPARATOR,
    SHEET_COLUMNS,
    TABLE_COLUMN_LABELS,
    ERROR_TITLE,
    ERROR_MESSAGE,
    EMPTY_MESSAGE,
    get_column_label,
)

__all__ = [
    # Settings
    "config",
    "SheetsConfig",
    "AppConfig",
    "Config",
    # Constants
    "NO_SELECTION",
    "ALL_ORIGINS_LABEL",
    "ALL_DESTINATIONS_LABEL",
    "CLEAR_FILTERS_LABEL",
    "SUMMARY_SEPARATOR",
    "SHEET_COLUMNS",
    "TABLE_COLUMN_LABELS",
    "ERROR_TITLE",
    "ERROR_MESSAGE",
    "EMPTY_MESSAGE",
    "get_column_label",
]
