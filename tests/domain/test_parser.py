"""Tests for palindate.domain.parser pure functions."""

from palindate.domain.models import DateComponents, ParseFailure
from palindate.domain.parser import parse_date, read_date


class TestParseDate:
    """Tests for parse_date."""

    def test_valid_date(self) -> None:
        """Should split a well-formed date into numbers."""
        assert parse_date("02/04/2024") == DateComponents(day=2, month=4, year=2024)
        assert parse_date("31/12/1999") == DateComponents(day=31, month=12, year=1999)

    def test_out_of_range_values_still_parse(self) -> None:
        """Should decompose structurally valid but impossible dates."""
        assert parse_date("99/99/9999") == DateComponents(day=99, month=99, year=9999)
        assert parse_date("00/00/0000") == DateComponents(day=0, month=0, year=0)

    def test_wrong_format_returns_none(self) -> None:
        """Should return None for anything not shaped like DD/MM/YYYY."""
        assert parse_date("2024-04-02") is None
        assert parse_date("02/04/24") is None
        assert parse_date("") is None
        assert parse_date("abcd") is None
        assert parse_date("02-04/2024") is None
        assert parse_date("02/04-2024") is None

    def test_any_length_other_than_ten_returns_none(self) -> None:
        """Should reject every length except 10."""
        for length in range(0, 20):
            if length == 10:
                continue
            assert parse_date("1" * length) is None

    def test_non_digit_segments_return_none(self) -> None:
        """Should reject letters and signs inside segments."""
        assert parse_date("aa/bb/cccc") is None
        assert parse_date("0a/02/2020") is None
        assert parse_date("02/02/20x0") is None
        assert parse_date("+2/02/2020") is None
        assert parse_date(" 2/02/2020") is None

    def test_non_ascii_digits_return_none(self) -> None:
        """Should only accept ASCII digits."""
        assert parse_date("٠٢/٠٢/٢٠٢٠") is None
        assert parse_date("０２/０２/２０２０") is None

    def test_non_string_returns_none(self) -> None:
        """Should return None rather than raise for non-strings."""
        assert parse_date(None) is None
        assert parse_date(20200202) is None
        assert parse_date(["02/02/2020"]) is None


class TestReadDate:
    """Tests for read_date."""

    def test_success_has_components_only(self) -> None:
        """Should carry components and no failure."""
        result = read_date("02/02/2020")

        assert result.ok
        assert result.components == DateComponents(day=2, month=2, year=2020)
        assert result.failure is None

    def test_failure_reasons(self) -> None:
        """Should name the structural problem."""
        assert read_date(42).failure == ParseFailure.NOT_A_STRING
        assert read_date("02/02/20").failure == ParseFailure.WRONG_LENGTH
        assert read_date("02.02.2020").failure == ParseFailure.MISSING_SEPARATOR
        assert read_date("ab/cd/efgh").failure == ParseFailure.NON_DIGIT

    def test_failure_has_no_components(self) -> None:
        """Should never return partial components."""
        result = read_date("0x/02/2020")

        assert not result.ok
        assert result.components is None
