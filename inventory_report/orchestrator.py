"""
Main Orchestrator Module

This module orchestrates the complete inventory reporting pipeline:
1. Check the report-enabled flag
2. Resolve the recipient list (defaults + reps + added addresses)
3. Build the inventory report
4. Format one email per recipient
5. Hand each email to the caller's delivery callable (if any)

This is pure orchestration/glue code - no business logic.
All business logic lives in the individual modules.
"""

from collections.abc import Mapping
from datetime import date, datetime, timezone
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple, Union

from inventory_report.config import (
    DEFAULT_RECIPIENT_NAME,
    DEFAULT_RECIPIENTS,
    REPORT_CONFIG,
)
from inventory_report.email_body_generator import format_rep_email
from inventory_report.errors import ValidationError
from inventory_report.logger import get_logger
from inventory_report.models import EmailMessage, Rep
from inventory_report.recipient_resolver import build_recipient_list
from inventory_report.report_builder import build_inventory_report, summarize_report

logger = get_logger(__name__)

DeliverFn = Callable[[str, EmailMessage], Any]


def _rep_names_by_email(reps: Sequence[Any]) -> Dict[str, Any]:
    """Map each rep email to the rep's name (first entry wins)."""
    names = {}
    for rep in reps:
        if isinstance(rep, Rep):
            rep = rep.model_dump()
        if not isinstance(rep, Mapping):
            raise ValidationError("rep must be an object.")
        email = "" if rep.get("email") is None else str(rep.get("email")).strip()
        if not email:
            raise ValidationError("rep email is required.")
        names.setdefault(email, rep.get("name"))
    return names


def run_inventory_reporting_pipeline(
    items: Sequence[Any],
    reps: Optional[Sequence[Any]] = None,
    as_of_date: Optional[Union[date, str]] = None,
    added_recipients: Optional[Sequence[str]] = None,
    deliver: Optional[DeliverFn] = None
) -> Tuple[bool, Optional[List[Tuple[str, EmailMessage]]], Optional[str]]:
    """
    Run the inventory reporting pipeline end-to-end.

    Args:
        items: Raw inventory records
        reps: Reps (Rep or mapping with name/email); their emails join the recipient list
        as_of_date: Report date. If None, uses today's UTC date.
        added_recipients: Extra addresses appended after the defaults and reps
        deliver: Callable(email_address, message). If None, nothing is delivered (dry run).

    Returns:
        Tuple of (success: bool, messages: Optional[List[(address, EmailMessage)]], error_msg: Optional[str])

    Example:
        success, messages, error = run_inventory_reporting_pipeline(
            items=records,
            reps=[{"name": "Alex", "email": "alex@example.com"}],
            as_of_date=date(2024, 1, 1),
        )
    """
    if not REPORT_CONFIG.report_enabled:
        error_msg = "Inventory report delivery is disabled"
        logger.info(error_msg)
        return False, None, error_msg

    try:
        logger.info("=" * 70)
        logger.info("Starting Inventory Reporting Pipeline")
        logger.info(f"Cadence: {REPORT_CONFIG.cadence}, time zone: {REPORT_CONFIG.time_zone}")
        logger.info(f"Dry run: {deliver is None}")
        logger.info("=" * 70)

        if as_of_date is None:
            as_of_date = datetime.now(timezone.utc).date()

        # Step 1: Resolve recipients
        logger.info("STEP 1: Resolving recipients...")
        rep_names = _rep_names_by_email(reps if isinstance(reps, (list, tuple)) else [])
        recipients = build_recipient_list(DEFAULT_RECIPIENTS + list(rep_names), added_recipients)

        if not recipients:
            error_msg = "Recipient list is empty"
            logger.warning(error_msg)
            return False, None, error_msg

        # Step 2: Build report
        logger.info("STEP 2: Building inventory report...")
        report = build_inventory_report(items, as_of_date)
        summary = summarize_report(report)
        logger.info(
            f"Report {summary['as_of_date']}: {summary['item_count']} item(s), "
            f"total value {summary['total_value']:.2f}, "
            f"{summary['stock_out_count']} projected stock-out(s)"
        )

        # Step 3: Format emails
        logger.info("STEP 3: Formatting emails...")
        messages = [
            (address, format_rep_email(
                {"name": rep_names.get(address, DEFAULT_RECIPIENT_NAME), "email": address},
                report,
            ))
            for address in recipients
        ]

    except ValidationError as e:
        error_msg = f"Inventory report validation failed: {str(e)}"
        logger.error(error_msg)
        return False, None, error_msg

    # Step 4: Deliver (skipped in dry run)
    if deliver is None:
        logger.info(f"DRY RUN MODE: {len(messages)} email(s) formatted, delivery skipped")
        return True, messages, None

    logger.info(f"STEP 4: Delivering {len(messages)} email(s)...")
    failed_count = 0
    for index, (address, message) in enumerate(messages, start=1):
        try:
            deliver(address, message)
            logger.debug(f"Delivered email {index}/{len(messages)}")
        except Exception as e:
            failed_count += 1
            logger.warning(f"Failed to deliver email {index}/{len(messages)}: {str(e)}", exc_info=True)

    if failed_count == len(messages):
        error_msg = f"Failed to deliver all {failed_count} email(s)"
        logger.error(error_msg)
        return False, None, error_msg

    if failed_count:
        logger.warning(f"Pipeline completed with {failed_count} failed delivery(ies)")

    logger.info("Pipeline completed successfully")
    return True, messages, None
