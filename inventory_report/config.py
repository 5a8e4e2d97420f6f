"""
Configuration file for the inventory reporting flow.

All configurable values must be defined here - no hardcoded values in logic files.
Update these values as needed without modifying the implementation code.

The report flags below (enabled, cadence, time zone, API base URL) are consumed
by the surrounding system. The pipeline only carries them; it does not interpret
cadence, time zone or API URL.
"""

import os
import logging
from typing import List

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict

load_dotenv()

# Set up logger for configuration warnings
_logger = logging.getLogger(__name__)

# ============================================================================
# Report Delivery Flags
# ============================================================================

# Toggle to enable/disable report delivery without code changes
# Expected format in .env: INVENTORY_REPORT_ENABLED=true
_report_enabled_str = os.getenv("INVENTORY_REPORT_ENABLED", "true").strip().lower()
REPORT_ENABLED = _report_enabled_str in ("true", "1", "yes")

if not REPORT_ENABLED:
    _logger.info("INVENTORY_REPORT_ENABLED is off. Report pipeline will skip delivery.")

# Reporting cadence label, for documentation and scheduling reference only
REPORT_CADENCE = os.getenv("INVENTORY_REPORT_CADENCE", "weekly")

# Time zone label for report rendering
# Use IANA timezone database names (e.g., 'UTC', 'America/New_York')
REPORT_TIME_ZONE = os.getenv("INVENTORY_REPORT_TIME_ZONE", "UTC")

# Base URL for external inventory APIs
# Expected format in .env: INVENTORY_API_BASE_URL=https://api.company.com
API_BASE_URL = os.getenv("INVENTORY_API_BASE_URL", "https://api.example.com")


class ReportConfig(BaseModel):
    """Read-only bundle of the report flags, built once at import."""

    model_config = ConfigDict(frozen=True)

    report_enabled: bool
    cadence: str
    time_zone: str
    api_base_url: str


REPORT_CONFIG = ReportConfig(
    report_enabled=REPORT_ENABLED,
    cadence=REPORT_CADENCE,
    time_zone=REPORT_TIME_ZONE,
    api_base_url=API_BASE_URL,
)

# ============================================================================
# Recipient Configuration
# ============================================================================

# Default recipients are read from environment variable DEFAULT_RECIPIENTS
# Expected format in .env: DEFAULT_RECIPIENTS=abc@company.com,xyz@company.com
# Values are split by comma, stripped of whitespace, and empty values are ignored
_default_recipients_str = os.getenv("DEFAULT_RECIPIENTS", "rep@example.com")

DEFAULT_RECIPIENTS: List[str] = [
    email.strip()
    for email in _default_recipients_str.split(",")
    if email.strip()
]

# Log warning if no recipients configured (but don't log actual email addresses)
if not DEFAULT_RECIPIENTS:
    _logger.warning(
        "DEFAULT_RECIPIENTS environment variable is empty. "
        "Only explicitly added recipients will receive the report."
    )
else:
    _logger.debug(f"Loaded {len(DEFAULT_RECIPIENTS)} default recipient(s)")

# Greeting name used for recipients that have no matching rep entry
DEFAULT_RECIPIENT_NAME = "team"

# Maximum number of recipients (checked before de-duplication)
MAX_RECIPIENTS = 500

# ============================================================================
# Item Validation Limits
# ============================================================================

MAX_ITEM_NAME_LENGTH = 200

MAX_IMAGE_URL_LENGTH = 1000

# ============================================================================
# Email Formatting
# ============================================================================

# {date} will be replaced with the report as-of date (format: YYYY-MM-DD)
EMAIL_SUBJECT_TEMPLATE = "Inventory report ({date})"

# Placeholder for missing optional values in the email body
NOT_AVAILABLE_LABEL = "N/A"

# ISO calendar date format used for every date in the report
DATE_FORMAT_ISO = "%Y-%m-%d"

# ============================================================================
# Logging
# ============================================================================

# Directory for log files, relative to the working directory
LOGS_DIR = os.getenv("INVENTORY_REPORT_LOGS_DIR", "logs")

# Log file name
LOG_FILENAME = "inventory_report.log"

# Write logs to LOGS_DIR/LOG_FILENAME; set INVENTORY_REPORT_LOG_TO_FILE=false for console only
_log_to_file_str = os.getenv("INVENTORY_REPORT_LOG_TO_FILE", "true").strip().lower()
LOG_TO_FILE = _log_to_file_str in ("true", "1", "yes")

# Level names from the logging module (DEBUG, INFO, WARNING, ...)
# Expected format in .env: INVENTORY_REPORT_CONSOLE_LOG_LEVEL=WARNING
_VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

FILE_LOG_LEVEL = os.getenv("INVENTORY_REPORT_FILE_LOG_LEVEL", "DEBUG").strip().upper()
CONSOLE_LOG_LEVEL = os.getenv("INVENTORY_REPORT_CONSOLE_LOG_LEVEL", "INFO").strip().upper()

if FILE_LOG_LEVEL not in _VALID_LOG_LEVELS:
    _logger.warning(f"Invalid INVENTORY_REPORT_FILE_LOG_LEVEL '{FILE_LOG_LEVEL}'. Using default: DEBUG.")
    FILE_LOG_LEVEL = "DEBUG"

if CONSOLE_LOG_LEVEL not in _VALID_LOG_LEVELS:
    _logger.warning(f"Invalid INVENTORY_REPORT_CONSOLE_LOG_LEVEL '{CONSOLE_LOG_LEVEL}'. Using default: INFO.")
    CONSOLE_LOG_LEVEL = "INFO"

# Log rotation: roll the file at LOG_MAX_BYTES, keep LOG_BACKUP_COUNT old files
LOG_MAX_BYTES = 5 * 1024 * 1024

LOG_BACKUP_COUNT = 3

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"

LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
