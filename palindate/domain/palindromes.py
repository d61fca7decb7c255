"""Palindromic date detection and search.

A date is palindromic when its DDMMYYYY digits read the same in both
directions, e.g. 02/02/2020 -> "02022020".
"""

from collections.abc import Iterator

from palindate.domain.calendar import format_date, next_day
from palindate.domain.parser import parse_date
from palindate.domain.validation import is_valid_date

# Default ceiling on day advances during a search
MAX_ITERATIONS = 100_000


def palindrome_digits(text: str) -> str | None:
    """Digits of a valid date as DDMMYYYY, or None if the date is invalid."""
    if not is_valid_date(text):
        return None

    components = parse_date(text)
    if components is None:
        return None

    return format_date(components, separator="")


def is_palindrome_date(text: str) -> bool:
    """Check whether a valid date reads the same forwards and backwards.

    Args:
        text: Date in DD/MM/YYYY format.

    Returns:
        True if the date is valid and its DDMMYYYY digits are a palindrome.
    """
    digits = palindrome_digits(text)
    if digits is None:
        return False

    left, right = 0, len(digits) - 1
    while left < right:
        if digits[left] != digits[right]:
            return False
        left += 1
        right -= 1
    return True


def iter_palindromic_dates(start_date: str, max_iterations: int = MAX_ITERATIONS) -> Iterator[str]:
    """Yield palindromic dates after start_date, earliest first.

    The start date itself is never tested. Stops after max_iterations
    dates have been tested.

    Args:
        start_date: Date to search forward from.
        max_iterations: Maximum number of dates to test.

    Yields:
        Palindromic dates in DD/MM/YYYY format.
    """
    candidate = next_day(start_date)
    for _ in range(max_iterations):
        if is_palindrome_date(candidate):
            yield candidate
        candidate = next_day(candidate)


def next_palindromic_dates(
    count: int,
    start_date: str,
    max_iterations: int = MAX_ITERATIONS,
) -> list[str] | None:
    """Find the next `count` palindromic dates after start_date.

    Args:
        count: Number of palindromic dates to collect.
        start_date: Date to search forward from (not itself included).
        max_iterations: Maximum number of dates to test before giving up.

    Returns:
        Palindromic dates, earliest first, or None if fewer than `count`
        were found within max_iterations or nothing was requested.
        A match on the final permitted iteration still counts, so the
        search succeeds if the last requested date is the last one tested.
    """
    if count <= 0:
        return None

    found: list[str] = []
    for palindrome in iter_palindromic_dates(start_date, max_iterations):
        found.append(palindrome)
        if len(found) == count:
            break

    if len(found) != count:
        return None
    return found
