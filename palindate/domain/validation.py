"""Pure functions for Gregorian date validation.

This module contains the leap-year rule, the single source of truth for
February's length, and the validity checks built on top of it:
- No I/O operations
- No exceptions for bad input, only return values
"""

from datetime import date
from typing import Any

from palindate.domain.models import DateIssue
from palindate.domain.parser import read_date

MIN_YEAR = 1000
MAX_YEAR = 9999

# Index 1 (February) is overridden for leap years
MONTH_LENGTHS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(year: int) -> bool:
    """Check the Gregorian leap-year rule.

    Args:
        year: Calendar year.

    Returns:
        True if divisible by 4 and not by 100, or divisible by 400.
    """
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_month(month: int, year: int) -> int:
    """Number of days in a month, February adjusted for leap years.

    Args:
        month: Month number (1-12).
        year: Calendar year.

    Returns:
        Day count for that month.

    Raises:
        ValueError: If month is outside 1-12.
    """
    if not 1 <= month <= 12:
        raise ValueError(f"Month must be between 1 and 12, got {month}")
    if month == 2 and is_leap_year(year):
        return 29
    return MONTH_LENGTHS[month - 1]


def date_issue(text: Any) -> DateIssue | None:
    """Explain why text is not a valid DD/MM/YYYY date.

    Args:
        text: Candidate date string. Any value is accepted.

    Returns:
        The first problem found, or None if the date is valid.
    """
    result = read_date(text)
    if result.components is None:
        assert result.failure is not None
        return DateIssue.from_parse_failure(result.failure)

    day, month, year = result.components.day, result.components.month, result.components.year

    if not 1 <= month <= 12:
        return DateIssue.MONTH_OUT_OF_RANGE
    if not MIN_YEAR <= year <= MAX_YEAR:
        return DateIssue.YEAR_OUT_OF_RANGE
    if not 1 <= day <= days_in_month(month, year):
        return DateIssue.DAY_OUT_OF_RANGE

    # The calendar library must agree with the table above
    try:
        rebuilt = date(year, month, day)
    except ValueError:
        return DateIssue.DAY_OUT_OF_RANGE
    if (rebuilt.day, rebuilt.month, rebuilt.year) != (day, month, year):
        return DateIssue.DAY_OUT_OF_RANGE

    return None


def is_valid_date(text: Any) -> bool:
    """Check whether text is a real Gregorian date in DD/MM/YYYY format."""
    return date_issue(text) is None
