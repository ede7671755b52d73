"""Tests for sheet row transformer module."""

import pytest


class TestRowsToRecords:
    """Tests for rows_to_records."""

    def test_header_is_skipped(self, sheet_rows):
        """Test the first row is treated as the header."""
        from src.ingestion.transformer import rows_to_records
        from src.analysis.route_filter import Record

        records = rows_to_records(sheet_rows)

        assert records == [
            Record("A", "X", "1"),
            Record("A", "Y", "2"),
            Record("B", "X", "3"),
        ]

    def test_empty_sheet(self):
        """Test no rows gives no records."""
        from src.ingestion.transformer import rows_to_records

        assert rows_to_records([]) == []

    def test_header_only(self):
        """Test a sheet with only a header gives no records."""
        from src.ingestion.transformer import rows_to_records

        assert rows_to_records([["Origin", "Destination", "Value"]]) == []

    def test_short_rows_are_padded(self):
        """Test trailing empty cells dropped by the API become empty strings."""
        from src.ingestion.transformer import rows_to_records
        from src.analysis.route_filter import Record

        records = rows_to_records([["h1", "h2", "h3"], ["A", "X"], ["B"]])

        assert records == [Record("A", "X", ""), Record("B", "", "")]

    def test_blank_rows_are_dropped(self):
        """Test rows without content are skipped."""
        from src.ingestion.transformer import rows_to_records

        records = rows_to_records([["h"], [], ["", "  "], ["A", "X", "1"]])

        assert len(records) == 1
        assert records[0].origin == "A"

    def test_extra_columns_ignored(self):
        """Test cells past the third column are dropped."""
        from src.ingestion.transformer import rows_to_records

        records = rows_to_records([["h"], ["A", "X", "1", "note"]])

        assert records[0].value == "1"

    def test_order_preserved(self, route_records):
        """Test records keep sheet order."""
        from src.ingestion.transformer import rows_to_records

        rows = [["Origin", "Destination", "Value"]] + [
            [r.origin, r.destination, r.value] for r in route_records
        ]

        assert rows_to_records(rows) == route_records


class TestCellHelpers:
    """Tests for cell and header helpers."""

    @pytest.mark.parametrize("value,expected", [
        ("abc", "abc"),
        (None, ""),
        (12, "12"),
        (1.5, "1.5"),
        (True, "True"),
    ])
    def test_clean_cell(self, value, expected):
        """Test cell conversion to string."""
        from src.ingestion.transformer import clean_cell

        assert clean_cell(value) == expected

    def test_header_row(self, sheet_rows):
        """Test header extraction."""
        from src.ingestion.transformer import header_row

        assert header_row(sheet_rows) == ["Origin", "Destination", "Value"]
        assert header_row([]) == []

    def test_transform_row_keeps_whitespace(self):
        """Test values are not trimmed."""
        from src.ingestion.transformer import transform_row

        record = transform_row([" A ", "X", "1"])

        assert record.origin == " A "
