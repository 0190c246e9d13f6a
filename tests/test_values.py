from __future__ import annotations

import math

import numpy as np
import pytest

from ads_analytics.transform.values import format_growth, format_value, parse_value


def test_parse_value_passes_numbers_through() -> None:
    assert parse_value(150) == 150.0
    assert parse_value(1.313) == 1.313
    assert parse_value(np.int64(7)) == 7.0
    assert parse_value(np.float64(2.5)) == 2.5


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("1,000", 1000.0),
        ("400,938.13", 400938.13),
        ("$1,507", 1507.0),
        ("7.66%", 7.66),
        ("-12.5", -12.5),
        ("2.96M", 2.96),
        ("1.2.3", 1.2),
        (".5", 0.5),
    ],
)
def test_parse_value_strips_separators_and_symbols(raw: str, expected: float) -> None:
    assert parse_value(raw) == pytest.approx(expected)


@pytest.mark.parametrize("raw", ["", "N/A", "-", "abc", None, True, [1, 2]])
def test_parse_value_unparseable_is_nan(raw: object) -> None:
    assert math.isnan(parse_value(raw))


@pytest.mark.parametrize(
    "value, expected",
    [
        (999, "999"),
        (1000, "1.00K"),
        (2000, "2.00K"),
        (999_999, "1000.00K"),
        (1_000_000, "1.00M"),
        (2_960_000, "2.96M"),
        (0.5, "0.500"),
        (1.313, "1.313"),
        (-5, "-5.000"),
        (20.38, "20.38"),
        (1, "1"),
    ],
)
def test_format_value_bands(value: float, expected: str) -> None:
    assert format_value(value) == expected


def test_format_value_band_boundaries() -> None:
    assert not format_value(999).endswith(("K", "M"))
    assert format_value(1000).endswith("K")
    assert format_value(999_999).endswith("K")
    assert format_value(1_000_000).endswith("M")


@pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
def test_format_value_non_finite(value: float) -> None:
    assert format_value(value) == "N/A"


def test_format_value_of_unparseable_string_still_renders() -> None:
    assert format_value(parse_value("n/a")) == "N/A"


def test_format_growth() -> None:
    assert format_growth(50.0) == "+50.0%"
    assert format_growth(-3.24) == "-3.2%"
    assert format_growth(0.0) == "+0.0%"
    assert format_growth(math.nan) == "N/A"
