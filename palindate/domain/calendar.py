"""Calendar arithmetic on DD/MM/YYYY strings.

Invalid input is passed through unchanged rather than rejected, so callers
that need to tell "advanced" from "rejected" should validate first.
"""

from dataclasses import replace

from palindate.domain.models import DateComponents
from palindate.domain.parser import parse_date
from palindate.domain.validation import days_in_month, is_leap_year, is_valid_date

__all__ = ["advance_days", "days_in_month", "format_date", "is_leap_year", "next_day", "roll_forward"]


def format_date(components: DateComponents, separator: str = "/") -> str:
    """Format components as day, month, year.

    Args:
        components: Day/month/year to format.
        separator: Placed between the parts. Use "" for the bare DDMMYYYY digits.

    Returns:
        Formatted date, day and month zero-padded to two digits.
        The year keeps its natural width.
    """
    return f"{components.day:02d}{separator}{components.month:02d}{separator}{components.year}"


def roll_forward(components: DateComponents) -> DateComponents:
    """Return the calendar day after a valid date."""
    day = components.day + 1
    month = components.month
    year = components.year

    if day > days_in_month(month, year):
        day = 1
        month += 1

    if month > 12:
        month = 1
        year += 1

    return replace(components, day=day, month=month, year=year)


def next_day(text: str) -> str:
    """Advance a DD/MM/YYYY date by one calendar day.

    Args:
        text: Date to advance.

    Returns:
        The following date, or text unchanged if it is not a valid date.
    """
    if not is_valid_date(text):
        return text

    components = parse_date(text)
    if components is None:
        return text

    return format_date(roll_forward(components))


def advance_days(text: str, days: int) -> str:
    """Advance a date by a number of days.

    Args:
        text: Date to advance.
        days: Number of days to move forward (0 or more).

    Returns:
        The resulting date, or text unchanged if it is not a valid date.

    Raises:
        ValueError: If days is negative.
    """
    if days < 0:
        raise ValueError(f"Days must be zero or more, got {days}")

    current = text
    for _ in range(days):
        advanced = next_day(current)
        if advanced == current:
            break
        current = advanced
    return current
