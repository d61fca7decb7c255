"""Domain models and pure functions for palindate.

This package contains the functional core:
- Pure functions with no side effects
- No I/O operations
- Easy to test
- Date logic separated from the CLI and config
"""

from palindate.domain.calendar import advance_days, days_in_month, format_date, is_leap_year, next_day
from palindate.domain.models import DateComponents, DateIssue, DateText, ParseFailure, ParseResult
from palindate.domain.palindromes import (
    MAX_ITERATIONS,
    is_palindrome_date,
    iter_palindromic_dates,
    next_palindromic_dates,
    palindrome_digits,
)
from palindate.domain.parser import parse_date, read_date
from palindate.domain.validation import date_issue, is_valid_date

__all__ = [
    # Models
    "DateComponents",
    "DateIssue",
    "DateText",
    "ParseFailure",
    "ParseResult",
    # Parsing and validation
    "date_issue",
    "is_valid_date",
    "parse_date",
    "read_date",
    # Calendar arithmetic
    "advance_days",
    "days_in_month",
    "format_date",
    "is_leap_year",
    "next_day",
    # Palindromes
    "MAX_ITERATIONS",
    "is_palindrome_date",
    "iter_palindromic_dates",
    "next_palindromic_dates",
    "palindrome_digits",
]
