"""palindate - Gregorian DD/MM/YYYY dates and palindromic date search."""

from palindate.domain import (
    MAX_ITERATIONS,
    DateComponents,
    DateIssue,
    DateText,
    ParseFailure,
    ParseResult,
    advance_days,
    date_issue,
    days_in_month,
    format_date,
    is_leap_year,
    is_palindrome_date,
    is_valid_date,
    iter_palindromic_dates,
    next_day,
    next_palindromic_dates,
    palindrome_digits,
    parse_date,
    read_date,
)

__all__ = [
    "MAX_ITERATIONS",
    "DateComponents",
    "DateIssue",
    "DateText",
    "ParseFailure",
    "ParseResult",
    "advance_days",
    "date_issue",
    "days_in_month",
    "format_date",
    "is_leap_year",
    "is_palindrome_date",
    "is_valid_date",
    "iter_palindromic_dates",
    "next_day",
    "next_palindromic_dates",
    "palindrome_digits",
    "parse_date",
    "read_date",
]
