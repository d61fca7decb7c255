"""Strict decomposition of DD/MM/YYYY strings.

Structure only: a parsed value may still be an impossible date.
"""

from typing import Any

from palindate.domain.models import DateComponents, ParseFailure, ParseResult

DATE_LENGTH = 10
SEPARATOR = "/"
SEPARATOR_POSITIONS = (2, 5)
DIGITS = frozenset("0123456789")


def read_date(text: Any) -> ParseResult:
    """Read a DD/MM/YYYY string into its components.

    Args:
        text: Candidate date string. Any value is accepted.

    Returns:
        ParseResult holding either the components or the reason parsing failed.
    """
    if not isinstance(text, str):
        return ParseResult(failure=ParseFailure.NOT_A_STRING)

    if len(text) != DATE_LENGTH:
        return ParseResult(failure=ParseFailure.WRONG_LENGTH)

    if any(text[i] != SEPARATOR for i in SEPARATOR_POSITIONS):
        return ParseResult(failure=ParseFailure.MISSING_SEPARATOR)

    day_part, month_part, year_part = text[0:2], text[3:5], text[6:10]

    # str.isdigit() also accepts non-ASCII digits such as "²"
    if not all(ch in DIGITS for ch in day_part + month_part + year_part):
        return ParseResult(failure=ParseFailure.NON_DIGIT)

    return ParseResult(
        components=DateComponents(
            day=int(day_part),
            month=int(month_part),
            year=int(year_part),
        )
    )


def parse_date(text: Any) -> DateComponents | None:
    """Parse a DD/MM/YYYY string, returning None if it is not shaped like one."""
    return read_date(text).components
