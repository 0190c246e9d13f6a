"""Trend series for charting.

`build_trend` turns one metric column of the table into a `TrendSeries`.
The chart bounds (`max`/`min`) are always taken from the values the series
actually returns, so a chart axis scales to exactly the data it plots.

`synthetic_trend` produces a seeded placeholder series for charts that have
no real history yet.
"""
from __future__ import annotations

from collections.abc import Sequence
from datetime import date, datetime
from typing import Any

import numpy as np
import pandas as pd

from ads_analytics.aggregate.periods import DATE_KEY, Record
from ads_analytics.models import TrendSeries
from ads_analytics.transform.values import parse_value

SYNTHETIC_POINTS = 12
SYNTHETIC_VARIANCE = 0.2


def period_label(value: Any) -> str:
    """Render a `Date` cell as a label (dates as YYYY-MM-DD, blanks as "")."""
    if value is None or (not isinstance(value, str) and pd.isna(value)):
        return ""
    if isinstance(value, (datetime, date)):
        return value.strftime("%Y-%m-%d")
    return str(value)


def _bounds(values: list[float]) -> tuple[float, float]:
    """Return (max, min) over the finite entries, (0.0, 0.0) if none."""
    arr = np.asarray(values, dtype=float)
    finite = arr[np.isfinite(arr)]
    if finite.size == 0:
        return 0.0, 0.0
    return float(finite.max()), float(finite.min())


def build_trend(
    records: Sequence[Record],
    metric: str,
    window: int | None = None,
) -> TrendSeries:
    """Build the trend series of one metric.

    Args:
        records: Records in ascending chronological order.
        metric: Metric name; records lacking it contribute NaN.
        window: When given, only the last `window` records are used.

    Returns:
        `TrendSeries` whose bounds cover exactly the returned values.
    """
    if window is not None:
        if window < 1:
            raise ValueError(f"window must be >= 1, got {window}")
        records = records[-window:]

    values = [parse_value(r.get(metric)) for r in records]
    labels = [period_label(r.get(DATE_KEY)) for r in records]
    hi, lo = _bounds(values)

    return TrendSeries(values=values, labels=labels, max=hi, min=lo)


def synthetic_trend(
    base_value: Any,
    *,
    seed: int,
    variance: float = SYNTHETIC_VARIANCE,
    points: int = SYNTHETIC_POINTS,
) -> TrendSeries:
    """Generate a reproducible placeholder trend around `base_value`.

    Each point is ``base + (u - 0.5) * base * variance`` with ``u`` uniform in
    [0, 1) drawn from a generator seeded with `seed`.

    Args:
        base_value: Centre of the series; parsed like any cell value.
        seed: Seed for `numpy.random.default_rng`.
        variance: Total spread relative to the base (0.2 = +/-10%).
        points: Number of points, labelled "Day 1" .. "Day N".
    """
    if points < 1:
        raise ValueError(f"points must be >= 1, got {points}")

    base = parse_value(base_value)
    if not np.isfinite(base):
        base = 0.0

    rng = np.random.default_rng(seed)
    values = (base + (rng.random(points) - 0.5) * base * variance).tolist()
    labels = [f"Day {i + 1}" for i in range(points)]
    hi, lo = _bounds(values)

    return TrendSeries(values=values, labels=labels, max=hi, min=lo)
