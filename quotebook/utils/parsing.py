"""Common parsing utility functions.

This module contains helper functions for parsing dates, amounts, and other data.
"""

import re
import math
import logging
from datetime import date, datetime, timedelta
from decimal import Decimal, InvalidOperation
from typing import Any, Callable, Optional, Union

from quotebook.config import DATE_FORMAT

logger = logging.getLogger(__name__)

ISO_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def today_iso(clock: Optional[Callable[[], date]] = None) -> str:
    """
    Today's date as YYYY-MM-DD.

    Args:
        clock: Optional callable returning the current date (for tests)
    """
    today = clock() if clock else date.today()
    return today.strftime(DATE_FORMAT)


def add_days(date_str: str, days: int) -> str:
    """Shift a YYYY-MM-DD date by a number of days."""
    parsed = datetime.strptime(date_str, DATE_FORMAT)
    return (parsed + timedelta(days=days)).strftime(DATE_FORMAT)


def is_iso_date(value: Any) -> bool:
    """Whether value is a YYYY-MM-DD string naming a real calendar date."""
    if not isinstance(value, str) or not ISO_DATE_PATTERN.match(value):
        return False
    try:
        datetime.strptime(value, DATE_FORMAT)
        return True
    except ValueError:
        return False


def parse_amount(amount_value: Optional[Union[str, int, float]]) -> Optional[float]:
    """
    Parse an amount value into a float.

    Empty strings count as missing, the way an untouched form field does.

    Args:
        amount_value: Amount as string, int, or float

    Returns:
        float value or None if parsing fails
    """
    if amount_value is None:
        return None

    # bool is an int subclass but never a valid amount
    if isinstance(amount_value, bool):
        logger.warning(f"Unknown amount type: {type(amount_value)}, value: {amount_value}")
        return None

    # If already a number, return as float
    if isinstance(amount_value, (int, float)):
        value = float(amount_value)
        if not math.isfinite(value):
            logger.warning(f"Could not parse amount: {amount_value}")
            return None
        return value

    # If it's a string, clean and convert
    if isinstance(amount_value, str):
        clean_amount = amount_value.strip().replace(',', '')
        if not clean_amount:
            return None
        try:
            value = Decimal(clean_amount)
        except InvalidOperation:
            logger.warning(f"Could not parse amount: {amount_value}")
            return None
        if not value.is_finite():
            logger.warning(f"Could not parse amount: {amount_value}")
            return None
        return float(value)

    logger.warning(f"Unknown amount type: {type(amount_value)}, value: {amount_value}")
    return None
