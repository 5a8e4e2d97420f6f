import os
import tempfile

import pytest

# Must be set before inventory_report.config is imported
os.environ["INVENTORY_REPORT_LOGS_DIR"] = tempfile.mkdtemp(prefix="inventory_report_logs_")
os.environ["DEFAULT_RECIPIENTS"] = "rep@example.com"
os.environ.pop("INVENTORY_REPORT_ENABLED", None)


@pytest.fixture
def raw_item():
    return {
        "sku": "SKU-1",
        "name": "Part",
        "onHand": 4,
        "price": 2,
        "costPerUnit": 1,
        "lastSoldAt": "2024-01-03",
        "imageUrl": "https://example.com/part.png",
        "totalUnitsSold": 5,
        "averageDailyUsage": 1,
    }
