"""Tests for palindate.domain.calendar pure functions."""

import pytest

from palindate.domain.calendar import advance_days, format_date, next_day, roll_forward
from palindate.domain.models import DateComponents


class TestFormatDate:
    """Tests for format_date."""

    def test_pads_day_and_month(self) -> None:
        """Should zero-pad day and month to two digits."""
        assert format_date(DateComponents(day=2, month=4, year=2024)) == "02/04/2024"
        assert format_date(DateComponents(day=12, month=4, year=2024)) == "12/04/2024"
        assert format_date(DateComponents(day=2, month=11, year=2024)) == "02/11/2024"
        assert format_date(DateComponents(day=31, month=12, year=1999)) == "31/12/1999"

    def test_empty_separator_gives_digits(self) -> None:
        """Should produce the bare DDMMYYYY digits."""
        assert format_date(DateComponents(day=2, month=2, year=2020), separator="") == "02022020"

    def test_year_keeps_natural_width(self) -> None:
        """Should not pad or truncate the year."""
        assert format_date(DateComponents(day=1, month=1, year=10000)) == "01/01/10000"
        assert format_date(DateComponents(day=1, month=1, year=999)) == "01/01/999"


class TestRollForward:
    """Tests for roll_forward."""

    def test_returns_new_value(self) -> None:
        """Should leave the original components untouched."""
        original = DateComponents(day=31, month=12, year=2024)
        rolled = roll_forward(original)

        assert rolled == DateComponents(day=1, month=1, year=2025)
        assert original == DateComponents(day=31, month=12, year=2024)


class TestNextDay:
    """Tests for next_day."""

    def test_same_month(self) -> None:
        """Should move to the next day within a month."""
        assert next_day("02/04/2024") == "03/04/2024"
        assert next_day("09/04/2024") == "10/04/2024"

    def test_month_rollover(self) -> None:
        """Should roll to the first of the next month."""
        assert next_day("30/04/2024") == "01/05/2024"
        assert next_day("31/01/2024") == "01/02/2024"

    def test_year_rollover(self) -> None:
        """Should roll December 31 into the next year."""
        assert next_day("31/12/2024") == "01/01/2025"

    def test_february(self) -> None:
        """Should respect February's length in leap and common years."""
        assert next_day("28/02/2023") == "01/03/2023"
        assert next_day("28/02/2024") == "29/02/2024"
        assert next_day("29/02/2024") == "01/03/2024"
        assert next_day("28/02/1900") == "01/03/1900"
        assert next_day("28/02/2000") == "29/02/2000"

    def test_invalid_input_returned_unchanged(self) -> None:
        """Should return invalid dates as given."""
        assert next_day("not a date") == "not a date"
        assert next_day("31/02/2024") == "31/02/2024"
        assert next_day("99/99/9999") == "99/99/9999"
        assert next_day("") == ""

    def test_last_supported_day(self) -> None:
        """Should step past 9999 with a natural-width year."""
        assert next_day("31/12/9999") == "01/01/10000"
        assert next_day("01/01/10000") == "01/01/10000"

    def test_full_year_returns_to_january_first(self) -> None:
        """Should reach 1 January of the next year after 365 or 366 steps."""
        for year, length in [(2023, 365), (2024, 366), (1900, 365), (2000, 366)]:
            current = f"01/01/{year}"
            for _ in range(length - 1):
                current = next_day(current)
                assert not current.startswith("01/01/")
            assert next_day(current) == f"01/01/{year + 1}"


class TestAdvanceDays:
    """Tests for advance_days."""

    def test_zero_days(self) -> None:
        """Should return the same date."""
        assert advance_days("15/06/2024", 0) == "15/06/2024"

    def test_several_days(self) -> None:
        """Should apply next_day repeatedly."""
        assert advance_days("28/02/2024", 2) == "01/03/2024"
        assert advance_days("25/12/2024", 10) == "04/01/2025"
        assert advance_days("01/01/2024", 366) == "01/01/2025"

    def test_invalid_input_returned_unchanged(self) -> None:
        """Should pass invalid dates through."""
        assert advance_days("31/02/2024", 5) == "31/02/2024"

    def test_negative_days_raises_valueerror(self) -> None:
        """Should raise ValueError for negative days."""
        with pytest.raises(ValueError):
            advance_days("01/01/2024", -1)
