"""Google Sheets client for loading the route table.

Reads a single range through the Sheets v4 values endpoint using an API key.
The sheet must be readable by key (shared publicly or with the key's project).
"""

from typing import Any, List, Optional
from pathlib import Path
from urllib.parse import quote
import sys

import requests
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

PROJECT_ROOT = Path(__file__).parent.parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from config import config
from config.logging_config import get_logger
from src.analysis.route_filter import Record
from src.ingestion.transformer import rows_to_records

logger = get_logger("sheets")


class SheetFetchError(Exception):
    """Raised when sheet data cannot be loaded."""


class SheetsClient:
    """Client for the Google Sheets values API."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        spreadsheet_id: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[int] = None,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize the client.

        Args:
            api_key: Google API key (defaults to GOOGLE_API_KEY).
            spreadsheet_id: Spreadsheet to read (defaults to SHEETS_SPREADSHEET_ID).
            base_url: Sheets API base URL.
            timeout: Request timeout in seconds.
            session: Optional requests session to reuse.
        """
        self.api_key = api_key or config.sheets.api_key
        self.spreadsheet_id = spreadsheet_id or config.sheets.spreadsheet_id
        self.base_url = (base_url or config.sheets.base_url).rstrip("/")
        self.timeout = timeout or config.sheets.timeout
        self.session = session or requests.Session()

    def values_url(self, range_name: str) -> str:
        """Build the values endpoint URL for a range."""
        return f"{self.base_url}/{self.spreadsheet_id}/values/{quote(range_name, safe='')}"

    @retry(
        retry=retry_if_exception_type((requests.exceptions.ConnectionError, requests.exceptions.Timeout)),
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=1, max=10),
        reraise=True,
    )
    def _get_values(self, range_name: str) -> dict:
        """Make a single values request. Connection failures are retried."""
        logger.debug(f"Sheets request: spreadsheet={self.spreadsheet_id}, range={range_name}")
        response = self.session.get(
            self.values_url(range_name),
            params={"key": self.api_key},
            timeout=self.timeout,
        )
        response.raise_for_status()
        return response.json()

    def get_values(self, range_name: Optional[str] = None) -> List[List[Any]]:
        """
        Fetch the raw rows of a range.

        Args:
            range_name: A1 range or sheet name (defaults to SHEETS_RANGE).

        Returns:
            List of rows; empty if the range holds no data.

        Raises:
            SheetFetchError: If the client is not configured.
            requests.exceptions.RequestException: On transport or HTTP errors.
        """
        if not self.api_key:
            raise SheetFetchError("No Google API key configured (set GOOGLE_API_KEY)")
        if not self.spreadsheet_id:
            raise SheetFetchError("No spreadsheet id configured (set SHEETS_SPREADSHEET_ID)")

        range_name = range_name or config.sheets.range_name
        payload = self._get_values(range_name)
        rows = payload.get("values") or []
        logger.info(f"Fetched {len(rows)} rows from range {payload.get('range', range_name)}")
        return rows


def fetch_records(
    client: Optional[SheetsClient] = None,
    range_name: Optional[str] = None,
) -> List[Record]:
    """
    Fetch the sheet and convert it to records.

    Args:
        client: Client to use (a default one is built from config).
        range_name: Range to read (defaults to SHEETS_RANGE).

    Returns:
        Records in sheet order.

    Raises:
        SheetFetchError: On any failure to load the data.
    """
    client = client or SheetsClient()
    try:
        rows = client.get_values(range_name)
    except SheetFetchError as e:
        logger.error(f"Error fetching sheet data: {e}")
        raise
    except (requests.exceptions.RequestException, ValueError) as e:
        logger.error(f"Error fetching sheet data: {e}")
        raise SheetFetchError("Failed to fetch sheet data") from e

    return rows_to_records(rows)
