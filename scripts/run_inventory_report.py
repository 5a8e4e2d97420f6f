#!/usr/bin/env python3
"""
Runner Script for Inventory Reporting Pipeline

Builds the inventory report from a JSON export and prints the formatted emails.
Delivery is not performed here (dry run); the surrounding system owns delivery
and scheduling.

USAGE:
------
python scripts/run_inventory_report.py export.json [YYYY-MM-DD]

INPUT FORMAT:
-------------
{
    "items": [{"sku": "...", "name": "...", "onHand": 10, ...}],
    "reps": [{"name": "Alex", "email": "alex@example.com"}],
    "addedRecipients": ["ops@example.com"]
}

ENVIRONMENT VARIABLES:
----------------------
- INVENTORY_REPORT_ENABLED (default: true)
- DEFAULT_RECIPIENTS (comma-separated)
- INVENTORY_REPORT_LOGS_DIR (default: logs)
"""

import json
import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from inventory_report.orchestrator import run_inventory_reporting_pipeline


def main():
    """
    Main entry point.

    Exits 0 when the emails were formatted, 1 on invalid input or a disabled report.
    """
    if len(sys.argv) < 2:
        print("Usage: run_inventory_report.py <export.json> [YYYY-MM-DD]")
        sys.exit(1)

    export_path = Path(sys.argv[1])
    as_of_date = sys.argv[2] if len(sys.argv) > 2 else None

    try:
        export = json.loads(export_path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        print(f"Could not read {export_path}: {str(e)}")
        sys.exit(1)

    if not isinstance(export, dict):
        print(f"{export_path} must contain a JSON object")
        sys.exit(1)

    success, messages, error = run_inventory_reporting_pipeline(
        items=export.get("items"),
        reps=export.get("reps"),
        as_of_date=as_of_date,
        added_recipients=export.get("addedRecipients"),
        deliver=None
    )

    if not success:
        print(f"Pipeline failed: {error}")
        sys.exit(1)

    for address, message in messages:
        print("=" * 70)
        print(f"To: {address}")
        print(f"Subject: {message.subject}")
        print()
        print(message.body)
    print("=" * 70)
    sys.exit(0)


if __name__ == "__main__":
    main()
