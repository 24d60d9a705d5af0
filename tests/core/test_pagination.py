"""Tests for pagination parsing and page arithmetic — pure, no IO."""

import pytest

from user_api.core.errors import InputValidationError
from user_api.core.pagination import (
    MAX_VALUE, page_offset, parse_positive_int, total_pages,
)


@pytest.mark.parametrize("raw", [None, "", "abc", "0", "  "])
def test_falls_back_to_default(raw):
    assert parse_positive_int(raw, 10, "Limit") == 10


def test_parses_leading_integer():
    assert parse_positive_int("3abc", 1, "Page") == 3
    assert parse_positive_int(" 25", 1, "Page") == 25


def test_negative_value_rejected():
    with pytest.raises(InputValidationError) as exc_info:
        parse_positive_int("-2", 1, "Page")
    assert exc_info.value.message == "Page must be a positive integer"
    assert exc_info.value.http_status == 400


def test_page_offset():
    assert page_offset(1, 10) == 0
    assert page_offset(3, 10) == 20


@pytest.mark.parametrize(
    "total,limit,expected",
    [(0, 10, 0), (1, 10, 1), (10, 10, 1), (11, 10, 2), (25, 7, 4)],
)
def test_total_pages_rounds_up(total, limit, expected):
    assert total_pages(total, limit) == expected


def test_max_value_accepted():
    assert parse_positive_int(str(MAX_VALUE), 10, "Limit") == MAX_VALUE


@pytest.mark.parametrize("raw", [str(MAX_VALUE + 1), "9" * 20, "9" * 5000])
def test_values_above_max_rejected(raw):
    with pytest.raises(InputValidationError) as exc_info:
        parse_positive_int(raw, 10, "Limit")
    assert exc_info.value.message == "Limit must be a positive integer"


def test_zero_padded_value_parses():
    assert parse_positive_int("0007", 1, "Page") == 7
    assert parse_positive_int("000", 1, "Page") == 1
