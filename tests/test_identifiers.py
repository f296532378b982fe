"""Unit tests for kennel.shared.utils.identifiers."""

from __future__ import annotations

import pytest

from kennel.shared.core.exceptions import InvalidIdError
from kennel.shared.utils.identifiers import parse_number, parse_record_id


@pytest.mark.unit
class TestParseNumber:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("7", 7.0),
            (" 7 ", 7.0),
            ("", 0.0),
            ("-3", -3.0),
            ("1.5", 1.5),
            (".5", 0.5),
            ("1e2", 100.0),
            ("0x10", 16.0),
            ("0b11", 3.0),
            ("\u00a07\n", 7.0),
            ("\ufeff7", 7.0),
        ],
    )
    def test_numbers(self, raw: str, expected: float) -> None:
        assert parse_number(raw) == expected

    def test_infinity(self) -> None:
        assert parse_number("-Infinity") == float("-inf")

    @pytest.mark.parametrize(
        "raw",
        ["abc", "1_000", "nan", "inf", "12abc", "1.2.3", "-0x10", "\u0661", "1\u0662", "\x1c1", "1\x85"],
    )
    def test_not_numbers(self, raw: str) -> None:
        with pytest.raises(InvalidIdError) as exc_info:
            parse_number(raw)
        assert exc_info.value.to_dict() == {"message": "id should be a number"}


@pytest.mark.unit
class TestParseRecordId:
    def test_integer(self) -> None:
        assert parse_record_id("42") == 42

    def test_whole_float_notation(self) -> None:
        assert parse_record_id("4.0") == 4

    @pytest.mark.parametrize("raw", ["1.5", "Infinity", "1e30"])
    def test_numbers_that_cannot_match(self, raw: str) -> None:
        assert parse_record_id(raw) is None

    def test_not_a_number_raises(self) -> None:
        with pytest.raises(InvalidIdError):
            parse_record_id("rex")
