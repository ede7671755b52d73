"""
Route Sheet Viewer - Main Streamlit Application

Run with: streamlit run app/main.py
"""

import streamlit as st
from pathlib import Path
import sys

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from config import config, ERROR_TITLE, ERROR_MESSAGE, EMPTY_MESSAGE
from config.logging_config import setup_logging, get_logger
from src.analysis.cached import load_dataset, clear_dataset_cache
from src.ingestion.sheets import SheetFetchError
from app.components.filters import render_filtered_table

logger = get_logger("app")


def render_error_page() -> None:
    """Render the load failure message."""
    st.markdown(
        f"<h2 style='text-align: center; color: #dc2626;'>{ERROR_TITLE}</h2>",
        unsafe_allow_html=True,
    )
    st.markdown(
        f"<p style='text-align: center; color: #4b5563;'>{ERROR_MESSAGE}</p>",
        unsafe_allow_html=True,
    )


def render_sidebar() -> None:
    """Render source details and the refresh control."""
    with st.sidebar:
        st.title(config.app.name)
        st.caption(f"v{config.app.version}")

        st.divider()

        st.subheader("Data Source")
        st.caption(f"Spreadsheet: {config.sheets.spreadsheet_id}")
        st.caption(f"Range: {config.sheets.range_name}")
        if not config.sheets.is_configured:
            st.warning("Set GOOGLE_API_KEY and SHEETS_SPREADSHEET_ID to load the sheet")

        if st.button("Reload Sheet", key="reload_sheet"):
            clear_dataset_cache()
            st.rerun()


def main():
    """Main application entry point."""
    st.set_page_config(
        page_title=config.app.name,
        layout="wide",
    )

    if "logging_initialized" not in st.session_state:
        setup_logging(config.app.log_level, log_file=config.app.log_file)
        st.session_state["logging_initialized"] = True

    render_sidebar()

    try:
        records = load_dataset()
    except SheetFetchError as e:
        logger.error(f"Page load failed: {e}")
        render_error_page()
        return

    if not records:
        st.info(EMPTY_MESSAGE)
        return

    st.title(config.app.name)
    render_filtered_table(records)


if __name__ == "__main__":
    main()
