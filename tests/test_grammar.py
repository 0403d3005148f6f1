"""Tests for lccallnumber.parsing.grammar — the call number grammar."""
from __future__ import annotations

import logging

import pytest

from lccallnumber.parsing.grammar import (
    ParsedCallNumber,
    is_valid_call_number,
    parse_call_number,
)


# ---------------------------------------------------------------------------
# Required fields
# ---------------------------------------------------------------------------


class TestRequiredFields:
    @pytest.mark.parametrize(
        ("raw", "letters", "number", "cutter_1"),
        [
            ("HD1691 .A59", "HD", "1691", "A59"),
            ("QA76.73 .P98", "QA", "76.73", "P98"),
            ("Z 699 .A1", "Z", "699", "A1"),
            ("KFX1234.5.B12", "KFX", "1234.5", "B12"),
        ],
    )
    def test_letters_number_and_cutter_reproduced(
        self, raw: str, letters: str, number: str, cutter_1: str
    ) -> None:
        parsed = parse_call_number(raw)
        assert parsed.letters == letters
        assert parsed.number == number
        assert parsed.cutters[0] == cutter_1
        assert parsed.is_valid is True

    def test_raw_input_kept(self) -> None:
        assert parse_call_number("  HD1691 .A59 ").raw == "  HD1691 .A59 "


class TestEndToEndExamples:
    def test_cutter_followed_by_year(self) -> None:
        parsed = parse_call_number("HD1691 .A59 1987")
        assert parsed.letters == "HD"
        assert parsed.number == "1691"
        assert parsed.cutters == ("A59", None, None)
        # The year comes after the cutter, so it lands in the remainder slot
        assert parsed.class_year is None
        assert parsed.remainder == "1987"
        assert parsed.is_valid is True

    def test_empty_string(self) -> None:
        parsed = parse_call_number("")
        assert parsed == ParsedCallNumber(raw="")
        assert parsed.letters is None
        assert parsed.number is None
        assert parsed.class_year is None
        assert parsed.cutters == (None, None, None)
        assert parsed.remainder is None
        assert parsed.is_valid is False

    def test_letters_only_is_invalid(self) -> None:
        parsed = parse_call_number("Z")
        assert parsed.letters == "Z"
        assert parsed.number is None
        assert parsed.cutters[0] is None
        assert parsed.is_valid is False


# ---------------------------------------------------------------------------
# Optional slots
# ---------------------------------------------------------------------------


class TestNumber:
    def test_decimal_without_cutter_point(self) -> None:
        parsed = parse_call_number("QA76.73.P98 2001")
        assert parsed.number == "76.73"
        assert parsed.cutters[0] == "P98"
        assert parsed.remainder == "2001"

    def test_point_before_cutter_is_not_a_decimal(self) -> None:
        parsed = parse_call_number("HD1691.A59")
        assert parsed.number == "1691"
        assert parsed.cutters[0] == "A59"
        assert parsed.remainder is None

    def test_missing_number_is_invalid(self) -> None:
        parsed = parse_call_number("HD .A59")
        assert parsed.letters == "HD"
        assert parsed.number is None
        assert parsed.is_valid is False


class TestClassYear:
    def test_ordinal_suffix_kept(self) -> None:
        parsed = parse_call_number("KF4558 15th .A2")
        assert parsed.number == "4558"
        assert parsed.class_year == "15th"
        assert parsed.cutters[0] == "A2"
        assert parsed.remainder is None
        assert parsed.is_valid is True

    def test_plain_year_before_cutter(self) -> None:
        parsed = parse_call_number("KF4558 1987 .A2")
        assert parsed.class_year == "1987"
        assert parsed.cutters[0] == "A2"


class TestCutters:
    def test_second_cutter_with_single_digit(self) -> None:
        parsed = parse_call_number("PS3545.I345 Z5 1990")
        assert parsed.cutters == ("I345", "Z5", None)
        assert parsed.remainder == "1990"
        assert parsed.is_valid is True

    def test_three_cutters(self) -> None:
        parsed = parse_call_number("G4104.C6 .S1 .A2 .B3")
        assert parsed.cutters == ("C6", "S1", "A2")
        assert parsed.remainder == ".B3"

    def test_first_cutter_without_digits_is_absent(self) -> None:
        # The lazy digit group prefers to match nothing at the end of input
        parsed = parse_call_number("HD1691 .A")
        assert parsed.cutters[0] is None
        assert parsed.is_valid is False

    def test_cutter_letter_without_digits_is_absent(self) -> None:
        parsed = parse_call_number("HD1691 .A59 .B")
        assert parsed.cutters[0] == "A59"
        assert parsed.cutters[1] is None


class TestRemainder:
    def test_remainder_trimmed(self) -> None:
        parsed = parse_call_number("HD1691 .A59 1987 edition   ")
        assert parsed.remainder == "1987 edition"

    def test_surrounding_whitespace_skipped(self) -> None:
        parsed = parse_call_number("   HD1691 .A59   ")
        assert parsed.letters == "HD"
        assert parsed.cutters[0] == "A59"
        assert parsed.remainder is None


# ---------------------------------------------------------------------------
# Malformed input
# ---------------------------------------------------------------------------


class TestMalformedInput:
    @pytest.mark.parametrize("raw", ["", "   ", "123", "hd1691 .a59", "!!!"])
    def test_unmatched_input_yields_empty_result(self, raw: str) -> None:
        parsed = parse_call_number(raw)
        assert parsed == ParsedCallNumber(raw=raw)
        assert parsed.is_valid is False

    def test_unmatched_input_logged_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="lccallnumber.parsing.grammar"):
            parse_call_number("123")
        assert "no match" in caplog.text

    def test_result_is_immutable(self) -> None:
        parsed = parse_call_number("HD1691 .A59")
        with pytest.raises(AttributeError):
            parsed.letters = "QA"  # type: ignore[misc]


class TestIsValidCallNumber:
    def test_all_present(self) -> None:
        assert is_valid_call_number("HD", "1691", "A59") is True

    @pytest.mark.parametrize(
        ("letters", "number", "cutter_1"),
        [
            (None, "1691", "A59"),
            ("HD", None, "A59"),
            ("HD", "1691", None),
            ("hd", "1691", "A59"),
            ("", "1691", "A59"),
        ],
    )
    def test_missing_or_bad_field(
        self, letters: str | None, number: str | None, cutter_1: str | None
    ) -> None:
        assert is_valid_call_number(letters, number, cutter_1) is False
