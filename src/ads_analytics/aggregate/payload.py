"""Assembly of the comparative payload.

`aggregate_metrics` is the single entry point used by the CLI and the
dashboard. For every metric of the most recent record it produces:

- the formatted current and previous values,
- the growth between the two periods (see `delta`),
- the trend series over the trailing window (see `trend`).

The function is pure: the input table is never modified and repeated calls
on the same table produce identical payloads.
"""
from __future__ import annotations

import logging
from collections.abc import Sequence

from ads_analytics.aggregate.delta import compute_delta
from ads_analytics.aggregate.periods import DEFAULT_WINDOW, Record, metric_keys, select_periods
from ads_analytics.aggregate.trend import build_trend
from ads_analytics.models import ComparativePayload
from ads_analytics.transform.values import format_value, parse_value

log = logging.getLogger(__name__)


def format_snapshot(record: Record, metrics: Sequence[str]) -> dict[str, str]:
    """Return the display strings of `metrics` for one record."""
    return {m: format_value(parse_value(record.get(m))) for m in metrics}


def aggregate_metrics(
    table: Sequence[Record],
    window: int = DEFAULT_WINDOW,
) -> ComparativePayload:
    """Build the full comparative payload for a metrics table.

    Args:
        table: Records in ascending chronological order.
        window: Number of trailing records used for the trend series.

    Returns:
        `ComparativePayload`. An empty table yields an empty payload; a
        single record yields trends and a current snapshot but no previous
        snapshot and no deltas.
    """
    periods = select_periods(table, window)
    if periods.current is None:
        log.warning("Empty metrics table; returning empty payload")
        return ComparativePayload()

    metrics = metric_keys(periods.current)
    current = format_snapshot(periods.current, metrics)
    trends = {m: build_trend(periods.trailing_window, m) for m in metrics}

    previous: dict[str, str] = {}
    deltas = []
    if periods.previous is not None:
        previous = format_snapshot(periods.previous, metrics)
        deltas = [
            compute_delta(m, periods.current.get(m), periods.previous.get(m))
            for m in metrics
        ]
    else:
        log.info("Only one record available; skipping period deltas")

    log.info(
        "Aggregated %d metrics over %d records (window=%d)",
        len(metrics),
        len(table),
        len(periods.trailing_window),
    )
    return ComparativePayload(
        current=current,
        previous=previous,
        trends=trends,
        deltas=deltas,
    )
