"""Tests for Google Sheets client module."""

import pytest
import requests
from unittest.mock import MagicMock


@pytest.fixture
def no_retry_wait(monkeypatch):
    """Skip tenacity sleeps between retries."""
    from src.ingestion.sheets import SheetsClient

    monkeypatch.setattr(SheetsClient._get_values.retry, "sleep", lambda seconds: None)


def make_client(response=None, side_effect=None, **kwargs):
    """Create a client over a mocked session."""
    from src.ingestion.sheets import SheetsClient

    session = MagicMock()
    if side_effect is not None:
        session.get.side_effect = side_effect
    else:
        session.get.return_value = response
    params = {
        "api_key": "test-key",
        "spreadsheet_id": "sheet123",
        "base_url": "https://sheets.example.com/v4/spreadsheets/",
        "timeout": 5,
    }
    params.update(kwargs)
    return SheetsClient(session=session, **params), session


class TestSheetsClient:
    """Tests for SheetsClient."""

    def test_values_url_quotes_range(self):
        """Test range names are URL-encoded."""
        client, _ = make_client()

        url = client.values_url("My Sheet!A1:C")

        assert url == "https://sheets.example.com/v4/spreadsheets/sheet123/values/My%20Sheet%21A1%3AC"

    def test_get_values_returns_rows(self, mock_response, sheet_rows):
        """Test rows are taken from the values field."""
        client, session = make_client(mock_response({"range": "DATA!A1:C4", "values": sheet_rows}))

        rows = client.get_values("DATA")

        assert rows == sheet_rows
        args, kwargs = session.get.call_args
        assert args[0].endswith("/sheet123/values/DATA")
        assert kwargs["params"] == {"key": "test-key"}
        assert kwargs["timeout"] == 5

    def test_get_values_without_values_field(self, mock_response):
        """Test an empty range returns no rows."""
        client, _ = make_client(mock_response({"range": "DATA!A1:Z1000"}))

        assert client.get_values("DATA") == []

    def test_get_values_requires_api_key(self, monkeypatch):
        """Test a missing key fails before any request."""
        from config import config
        from src.ingestion.sheets import SheetFetchError

        monkeypatch.setattr(config.sheets, "api_key", None)
        client, session = make_client(api_key=None)

        with pytest.raises(SheetFetchError):
            client.get_values("DATA")
        session.get.assert_not_called()

    def test_http_error_not_retried(self, mock_response):
        """Test HTTP errors propagate after a single request."""
        error = requests.exceptions.HTTPError("403 Forbidden")
        client, session = make_client(mock_response(status_code=403, raise_error=error))

        with pytest.raises(requests.exceptions.HTTPError):
            client.get_values("DATA")
        assert session.get.call_count == 1

    def test_connection_error_retried(self, mock_response, sheet_rows, no_retry_wait):
        """Test connection failures are retried until success."""
        client, session = make_client(side_effect=[
            requests.exceptions.ConnectionError("reset"),
            mock_response({"values": sheet_rows}),
        ])

        assert client.get_values("DATA") == sheet_rows
        assert session.get.call_count == 2

    def test_connection_error_gives_up(self, no_retry_wait):
        """Test retries stop after three attempts."""
        client, session = make_client(side_effect=requests.exceptions.Timeout("slow"))

        with pytest.raises(requests.exceptions.Timeout):
            client.get_values("DATA")
        assert session.get.call_count == 3


class TestFetchRecords:
    """Tests for fetch_records."""

    def test_fetch_records(self, mock_response, sheet_rows):
        """Test fetched rows are transformed to records."""
        from src.ingestion.sheets import fetch_records
        from src.analysis.route_filter import Record

        client, _ = make_client(mock_response({"values": sheet_rows}))

        records = fetch_records(client, "DATA")

        assert records[0] == Record("A", "X", "1")
        assert len(records) == 3

    def test_fetch_records_wraps_http_error(self, mock_response):
        """Test request failures surface as SheetFetchError."""
        from src.ingestion.sheets import SheetFetchError, fetch_records

        error = requests.exceptions.HTTPError("404 Not Found")
        client, _ = make_client(mock_response(status_code=404, raise_error=error))

        with pytest.raises(SheetFetchError, match="Failed to fetch sheet data") as exc_info:
            fetch_records(client, "DATA")
        assert exc_info.value.__cause__ is error

    def test_fetch_records_wraps_bad_json(self, mock_response):
        """Test an undecodable body surfaces as SheetFetchError."""
        from src.ingestion.sheets import SheetFetchError, fetch_records

        response = mock_response()
        response.json.side_effect = ValueError("not json")
        client, _ = make_client(response)

        with pytest.raises(SheetFetchError):
            fetch_records(client, "DATA")

    def test_fetch_records_missing_spreadsheet(self, monkeypatch):
        """Test configuration errors pass through unchanged."""
        from config import config
        from src.ingestion.sheets import SheetFetchError, fetch_records

        monkeypatch.setattr(config.sheets, "spreadsheet_id", "")
        client, _ = make_client(spreadsheet_id="")

        with pytest.raises(SheetFetchError, match="spreadsheet id"):
            fetch_records(client, "DATA")
