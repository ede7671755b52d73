#!/usr/bin/env python
"""
Sheet Check for Route Sheet Viewer.

Fetches the configured Google Sheet and reports what the page would show:
the number of records and the origin and destination options.

Use this script for:
- Verifying GOOGLE_API_KEY / SHEETS_SPREADSHEET_ID before starting the app
- Quick inspection of the sheet contents from a terminal

Usage:
    python scripts/check_sheet.py [options]

Options:
    --range RANGE       Sheet range to read (default: SHEETS_RANGE)
    --json              Output in JSON format
    --log-level LEVEL   Logging level (default: LOG_LEVEL)
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, List

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from config import config
from config.logging_config import setup_logging, get_logger
from src.analysis.route_filter import Record, unique_destinations, unique_origins
from src.ingestion.sheets import SheetFetchError, fetch_records

logger = get_logger("check_sheet")


def build_report(records: List[Record]) -> Dict[str, Any]:
    """
    Summarize fetched records.

    Args:
        records: Records from the sheet.

    Returns:
        Dictionary with counts and option lists.
    """
    return {
        "spreadsheet_id": config.sheets.spreadsheet_id,
        "record_count": len(records),
        "origins": unique_origins(records),
        "destinations": unique_destinations(records),
    }


def print_report(report: Dict[str, Any]) -> None:
    """Print a report in human-readable form."""
    print(f"Spreadsheet:  {report['spreadsheet_id']}")
    print(f"Records:      {report['record_count']:,}")
    print(f"Origins:      {len(report['origins'])}")
    for origin in report["origins"]:
        print(f"  - {origin}")
    print(f"Destinations: {len(report['destinations'])}")
    for destination in report["destinations"]:
        print(f"  - {destination}")


def main():
    """Main entry point for the sheet check."""
    parser = argparse.ArgumentParser(
        description="Check the route sheet configuration",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "--range",
        dest="range_name",
        default=config.sheets.range_name,
        help="Sheet range to read",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output in JSON format",
    )
    parser.add_argument(
        "--log-level",
        default=config.app.log_level,
        help="Logging level",
    )

    args = parser.parse_args()

    setup_logging(args.log_level, log_file=config.app.log_file)

    try:
        records = fetch_records(range_name=args.range_name)
    except SheetFetchError as e:
        cause = f" ({e.__cause__})" if e.__cause__ else ""
        if args.json:
            print(json.dumps({"error": f"{e}{cause}"}, indent=2))
        else:
            print(f"Error: {e}{cause}", file=sys.stderr)
        sys.exit(1)

    report = build_report(records)

    if args.json:
        print(json.dumps(report, indent=2))
    else:
        print_report(report)


if __name__ == "__main__":
    main()
