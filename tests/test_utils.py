"""Tests for utility functions."""

from datetime import date, datetime

import pytest

from cin_codec.utils import (
    age_at,
    contains_whitespace,
    equals,
    is_blank,
    make_date,
    mask_identifier,
    parse_pure_date,
)


class TestTextPredicates:
    """Tests for text predicates."""

    def test_is_blank(self) -> None:
        assert is_blank(None) is True
        assert is_blank("") is True
        assert is_blank(" \t\n") is True
        assert is_blank("　") is True
        assert is_blank(" a ") is False

    def test_contains_whitespace(self) -> None:
        assert contains_whitespace("1101 01") is True
        assert contains_whitespace("110101\t") is True
        assert contains_whitespace("110101 ") is True
        assert contains_whitespace("110101") is False
        assert contains_whitespace("") is False
        assert contains_whitespace(None) is False

    def test_equals(self) -> None:
        assert equals("X", "X") is True
        assert equals("X", "x") is False
        assert equals("X", "x", ignore_case=True) is True
        assert equals(None, None) is True
        assert equals("X", None) is False

    def test_mask_identifier(self) -> None:
        assert mask_identifier("110101199003077715") == "110101************"
        assert mask_identifier("110101199003077715", keep=0) == "*" * 18
        assert mask_identifier("H123") == "H123"
        assert mask_identifier("") == ""


class TestDates:
    """Tests for calendar helpers."""

    def test_make_date(self) -> None:
        assert make_date(2000, 2, 29) == date(2000, 2, 29)

    @pytest.mark.parametrize(
        "year,month,day",
        [(1900, 2, 29), (2023, 2, 29), (1990, 4, 31), (1990, 13, 1), (1990, 0, 1), (1990, 1, 32)],
    )
    def test_make_date_impossible(self, year, month, day) -> None:
        with pytest.raises(ValueError):
            make_date(year, month, day)

    def test_parse_pure_date(self) -> None:
        assert parse_pure_date("19900307") == date(1990, 3, 7)

    @pytest.mark.parametrize("value", ["1990037", "199003071", "1990O307", "19900230", "²⁰⁰⁰0101"])
    def test_parse_pure_date_invalid(self, value) -> None:
        with pytest.raises(ValueError):
            parse_pure_date(value)

    def test_age_at(self) -> None:
        assert age_at(date(2000, 3, 15), date(2024, 3, 14)) == 23
        assert age_at(date(2000, 3, 15), date(2024, 3, 15)) == 24

    def test_age_at_accepts_datetime(self) -> None:
        assert age_at(date(2000, 3, 15), datetime(2024, 3, 15, 8, 30)) == 24

    def test_age_at_before_birth(self) -> None:
        with pytest.raises(ValueError):
            age_at(date(2000, 3, 15), date(2000, 3, 14))
