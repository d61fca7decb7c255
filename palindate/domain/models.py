"""Domain type definitions for palindate.

- DateText: Date string in DD/MM/YYYY format
- DateComponents: Numeric day/month/year decomposition of a DateText
- ParseFailure: Why a string could not be decomposed at all
- DateIssue: Why a string is not a real calendar date
"""

from dataclasses import dataclass
from enum import Enum
from typing import NewType

# DateText is always DD/MM/YYYY (e.g., "02/02/2020")
DateText = NewType("DateText", str)


@dataclass(frozen=True)
class DateComponents:
    """Immutable day/month/year triple.

    Values come straight from the digits and may be out of range until
    validated (e.g., day=99).
    """

    day: int
    month: int
    year: int


class ParseFailure(Enum):
    """Structural reasons a string is not DD/MM/YYYY."""

    NOT_A_STRING = "not a string"
    WRONG_LENGTH = "must be exactly 10 characters"
    MISSING_SEPARATOR = "expected '/' at positions 3 and 6"
    NON_DIGIT = "day, month and year must be digits"


class DateIssue(Enum):
    """Every reason a string is rejected as a calendar date.

    The first four members mirror ParseFailure and share its messages.
    """

    NOT_A_STRING = ParseFailure.NOT_A_STRING.value
    WRONG_LENGTH = ParseFailure.WRONG_LENGTH.value
    MISSING_SEPARATOR = ParseFailure.MISSING_SEPARATOR.value
    NON_DIGIT = ParseFailure.NON_DIGIT.value
    MONTH_OUT_OF_RANGE = "month must be between 01 and 12"
    YEAR_OUT_OF_RANGE = "year must be between 1000 and 9999"
    DAY_OUT_OF_RANGE = "day does not exist in that month"

    @property
    def message(self) -> str:
        """Human-readable explanation of the issue."""
        return str(self.value)

    @classmethod
    def from_parse_failure(cls, failure: ParseFailure) -> "DateIssue":
        """Map a parse failure onto the issue of the same name."""
        return cls[failure.name]


@dataclass(frozen=True)
class ParseResult:
    """Outcome of reading a date string: components or a failure, never both."""

    components: DateComponents | None = None
    failure: ParseFailure | None = None

    @property
    def ok(self) -> bool:
        """True if the string was decomposed into components."""
        return self.components is not None
