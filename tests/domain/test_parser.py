"""End-to-end tests for parse_duration."""

import pytest

from durctl import parse_duration
from durctl.domain.errors import FailureReason, InvalidDurationError
from durctl.domain.models import Duration
from durctl.domain.parser import ParseOptions

LENIENT = ParseOptions(allow_trailing=True)


class TestLiteralCases:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("P3W1D", Duration(weeks=3, days=1)),
            ("-P1Y1M", Duration(is_negative=True, years=1, months=1)),
            ("+P1Y1M", Duration(years=1, months=1)),
            (
                "P1Y1M1DT1H1M1.1S",
                Duration(
                    years=1, months=1, days=1, hours=1, minutes=1, seconds=1, milliseconds=100
                ),
            ),
            ("P3DT4H59M", Duration(days=3, hours=4, minutes=59)),
            ("PT0.0021S", Duration(milliseconds=2, microseconds=100)),
            ("PT0S", Duration()),
            ("P0D", Duration()),
            ("PT2.5H", Duration(hours=2, minutes=30)),
            ("PT36H", Duration(hours=36)),
            ("P1W", Duration(weeks=1)),
            ("P1Y2M3W4DT5H6M7S", Duration(
                years=1, months=2, weeks=3, days=4, hours=5, minutes=6, seconds=7
            )),
        ],
    )
    def test_parses(self, text: str, expected: Duration) -> None:
        assert parse_duration(text) == expected

    def test_zero_duration_is_positive(self) -> None:
        assert parse_duration("PT0S").is_negative is False
        assert parse_duration("P0D").is_zero


class TestSyntax:
    def test_case_insensitive(self) -> None:
        assert parse_duration("p1y2m3dt4h5m6s") == parse_duration("P1Y2M3DT4H5M6S")

    def test_comma_decimal_separator(self) -> None:
        assert parse_duration("PT1,5S") == parse_duration("PT1.5S")

    def test_sign_defaults_to_positive(self) -> None:
        assert parse_duration("P1D").is_negative is False

    def test_date_only_has_zero_time(self) -> None:
        d = parse_duration("P2D")
        assert (d.hours, d.minutes, d.seconds) == (0, 0, 0)

    def test_time_separator_without_time_units(self) -> None:
        """A dangling ``T`` after date units is accepted."""
        assert parse_duration("P1DT") == Duration(days=1)

    def test_large_values_are_exact(self) -> None:
        assert parse_duration("P99999999999999999999Y").years == 99999999999999999999

    def test_digit_runs_beyond_int_str_limit(self) -> None:
        digits = "9" * 5000
        d = parse_duration(f"P{digits}YT{digits}S")
        assert d.years == 10**5000 - 1
        assert d.seconds == 10**5000 - 1

    def test_long_digit_run_without_designator_is_invalid_duration(self) -> None:
        with pytest.raises(InvalidDurationError) as info:
            parse_duration("P" + "9" * 5000 + "X")
        assert info.value.reason is FailureReason.UNEXPECTED_INPUT
        assert info.value.position == 1

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "1Y",
            "T1H",
            "P-1Y",
            "P1Y-1M",
            "--P1Y",
            "+-P1Y",
            "P1.5Y",
            "P1.5D",
            "P1D1Y",
            "P1M1Y",
            "PT1S1H",
            "PT.5S",
            "PT1..5S",
            "PT1.2.3S",
            "P1H",
            "PT1D",
            "P1Y ",
            " P1Y",
            "P1YX",
            "P1DT1H1M1S1",
        ],
    )
    def test_rejects(self, text: str) -> None:
        with pytest.raises(InvalidDurationError):
            parse_duration(text)

    def test_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            parse_duration("nope")


class TestSingleFractionRule:
    @pytest.mark.parametrize(
        "text",
        ["PT1.5H1.5M", "PT1.5H1M", "PT1.5H1S", "PT1.5M1S", "PT1.5H0.5S", "PT0.5M0.5S"],
    )
    def test_rejects_fraction_followed_by_finer_unit(self, text: str) -> None:
        with pytest.raises(InvalidDurationError) as exc_info:
            parse_duration(text)
        assert exc_info.value.reason is FailureReason.FRACTIONAL_UNIT

    def test_fraction_followed_by_zero_unit_is_allowed(self) -> None:
        assert parse_duration("PT1.5H0M0S") == Duration(hours=1, minutes=30)

    def test_integral_decimal_counts_as_regular(self) -> None:
        assert parse_duration("PT1.0H30M") == Duration(hours=1, minutes=30)


class TestEmptyDuration:
    """Durations with no unit component are rejected unless allowed."""

    @pytest.mark.parametrize("text", ["P", "PT", "+P", "-PT", "p", "pt"])
    def test_rejected_by_default(self, text: str) -> None:
        with pytest.raises(InvalidDurationError) as exc_info:
            parse_duration(text)
        assert exc_info.value.reason is FailureReason.EMPTY

    @pytest.mark.parametrize("text", ["P", "PT"])
    def test_allowed_by_option(self, text: str) -> None:
        d = parse_duration(text, options=ParseOptions(allow_empty=True))
        assert d == Duration()

    def test_negative_empty_keeps_sign(self) -> None:
        d = parse_duration("-P", options=ParseOptions(allow_empty=True))
        assert d.is_negative is True
        assert d.is_zero


class TestTrailingInput:
    def test_rejected_by_default_with_position(self) -> None:
        with pytest.raises(InvalidDurationError) as exc_info:
            parse_duration("P1Dxyz")
        assert exc_info.value.reason is FailureReason.UNEXPECTED_INPUT
        assert exc_info.value.position == 3

    def test_lenient_discards_trailing(self) -> None:
        assert parse_duration("P1Dxyz", options=LENIENT) == Duration(days=1)

    def test_lenient_still_requires_duration_start(self) -> None:
        with pytest.raises(InvalidDurationError) as exc_info:
            parse_duration("xyz", options=LENIENT)
        assert exc_info.value.reason is FailureReason.SYNTAX

    def test_lenient_misplaced_sign_is_empty(self) -> None:
        """``P-1Y`` reads no units before the sign, so it is still rejected."""
        with pytest.raises(InvalidDurationError) as exc_info:
            parse_duration("P-1Y", options=LENIENT)
        assert exc_info.value.reason is FailureReason.EMPTY

    def test_lenient_still_enforces_fraction_rule(self) -> None:
        with pytest.raises(InvalidDurationError):
            parse_duration("PT1.5H1Mjunk", options=LENIENT)


class TestPurity:
    def test_same_input_same_output(self) -> None:
        assert parse_duration("P1DT2.25H") == parse_duration("P1DT2.25H")

    def test_options_default_is_strict(self) -> None:
        assert ParseOptions() == ParseOptions(allow_trailing=False, allow_empty=False)
