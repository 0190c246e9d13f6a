"""Period-over-period growth.

Growth is ``(current - previous) / |previous| * 100``. A previous value of
zero (or an unparseable value on either side) has no comparable baseline:
the delta is reported with ``growth=0.0`` and ``comparable=False`` so that
no ``inf``/``nan`` ever reaches the payload.
"""
from __future__ import annotations

import logging
import math
import numbers
from collections.abc import Iterable, Sequence
from typing import Any

from ads_analytics.aggregate.periods import Record, select_periods
from ads_analytics.models import MetricDelta
from ads_analytics.transform.values import parse_value

log = logging.getLogger(__name__)

DEFAULT_GROWTH_METRICS = ("Impressions", "Clicks", "CTPR")


def growth_pct(current: Any, previous: Any) -> float | None:
    """Return the percentage change from `previous` to `current`.

    Returns:
        The growth percentage, or None when there is no comparable baseline.
    """
    curr = parse_value(current)
    prev = parse_value(previous)
    if math.isnan(curr) or math.isnan(prev) or prev == 0:
        return None

    growth = (curr - prev) / abs(prev) * 100.0
    if not math.isfinite(growth):
        return None
    return growth


def _cell(value: Any) -> Any:
    """Keep raw scalars for the payload as plain Python types; NaN becomes None."""
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, bool):
        return str(value)
    if isinstance(value, numbers.Integral):
        return int(value)
    if isinstance(value, numbers.Real):
        return None if math.isnan(value) else float(value)
    return str(value)


def compute_delta(label: str, current: Any, previous: Any) -> MetricDelta:
    """Build the `MetricDelta` for one metric between two periods.

    Args:
        label: Metric name.
        current: Raw value of the metric in the current period.
        previous: Raw value of the metric in the previous period.
    """
    growth = growth_pct(current, previous)
    if growth is None:
        log.debug("No comparable baseline for %s (previous=%r)", label, previous)

    return MetricDelta(
        label=label,
        growth=0.0 if growth is None else growth,
        value=_cell(current),
        previous_value=_cell(previous),
        comparable=growth is not None,
    )


def growth_report(
    table: Sequence[Record],
    metrics: Iterable[str] = DEFAULT_GROWTH_METRICS,
) -> list[MetricDelta]:
    """Return growth of the requested metrics between the last two records.

    Args:
        table: Records in ascending chronological order.
        metrics: Metric names to report, in output order.

    Returns:
        One `MetricDelta` per metric, or an empty list when the table has
        fewer than two records.
    """
    periods = select_periods(table)
    if periods.current is None or periods.previous is None:
        log.info("Growth report skipped: %d record(s), need at least 2", len(table))
        return []

    return [
        compute_delta(m, periods.current.get(m), periods.previous.get(m))
        for m in metrics
    ]
