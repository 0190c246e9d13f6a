from __future__ import annotations

import math
from datetime import datetime

import pytest

from ads_analytics.aggregate.trend import build_trend, period_label, synthetic_trend


def _table(n: int) -> list[dict[str, object]]:
    return [{"Date": f"D{i}", "Sales": f"{i * 1000:,}"} for i in range(1, n + 1)]


def test_build_trend_parses_values_and_labels() -> None:
    t = build_trend(_table(3), "Sales")
    assert t.values == [1000.0, 2000.0, 3000.0]
    assert t.labels == ["D1", "D2", "D3"]
    assert t.max == 3000.0
    assert t.min == 1000.0


def test_bounds_follow_the_window() -> None:
    # full history peaks at D1; the window must not see it
    table = [{"Date": "D0", "Sales": 1_000_000}] + _table(12)
    t = build_trend(table, "Sales", window=12)
    assert len(t.values) == 12
    assert t.labels[0] == "D1"
    assert t.max == 12000.0
    assert t.min == 1000.0


def test_bounds_enclose_values() -> None:
    table = [{"Date": f"D{i}", "CPC": v} for i, v in enumerate([3.2, -1.0, 8.5, 0.0, 4.4])]
    t = build_trend(table, "CPC")
    assert all(t.min <= v <= t.max for v in t.values)


def test_missing_and_unparseable_cells_become_nan() -> None:
    table = [{"Date": "D1", "Clicks": 5}, {"Date": "D2"}, {"Date": "D3", "Clicks": "n/a"}]
    t = build_trend(table, "Clicks")
    assert t.values[0] == 5.0
    assert math.isnan(t.values[1])
    assert math.isnan(t.values[2])
    assert t.max == 5.0
    assert t.min == 5.0


def test_all_missing_series_has_zero_bounds() -> None:
    t = build_trend([{"Date": "D1"}], "Clicks")
    assert t.max == 0.0
    assert t.min == 0.0


def test_empty_records() -> None:
    t = build_trend([], "Clicks")
    assert t.values == []
    assert t.labels == []


def test_period_label_formats() -> None:
    assert period_label(datetime(2024, 3, 1, 12, 30)) == "2024-03-01"
    assert period_label(None) == ""
    assert period_label(math.nan) == ""
    assert period_label("Week 9") == "Week 9"


def test_synthetic_trend_is_reproducible() -> None:
    a = synthetic_trend("2.96M", seed=7)
    b = synthetic_trend("2.96M", seed=7)
    c = synthetic_trend("2.96M", seed=8)
    assert a.values == b.values
    assert a.values != c.values


def test_synthetic_trend_stays_within_variance() -> None:
    t = synthetic_trend(100, seed=1, variance=0.2, points=30)
    assert len(t.values) == 30
    assert t.labels[0] == "Day 1"
    assert t.labels[-1] == "Day 30"
    assert all(90.0 <= v <= 110.0 for v in t.values)
    assert t.max == max(t.values)
    assert t.min == min(t.values)


def test_synthetic_trend_unparseable_base() -> None:
    t = synthetic_trend(None, seed=3)
    assert t.values == [0.0] * 12


def test_synthetic_trend_rejects_empty() -> None:
    with pytest.raises(ValueError):
        synthetic_trend(10, seed=0, points=0)
