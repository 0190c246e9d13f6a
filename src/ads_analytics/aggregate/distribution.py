"""Sales distribution and dashboard metric groupings."""

from __future__ import annotations

import math
from typing import Any

from ads_analytics.aggregate.periods import Record
from ads_analytics.models import SalesDistribution
from ads_analytics.transform.values import parse_value

# Dashboard sections, in display order.
METRIC_GROUPS: dict[str, tuple[str, ...]] = {
    "Performance Metrics": ("Impressions", "Clicks", "CTPR"),
    "Cost Analysis": ("Ad Cost", "CPC", "ACOS"),
    "Sales Performance": ("Sales", "Ad Sales", "Ad Sales %"),
    "Conversion Analytics": ("Ad Quantity", "Ad GRP", "Conversion%"),
}


def _finite_or_zero(value: Any) -> float:
    v = parse_value(value)
    return v if math.isfinite(v) else 0.0


def sales_distribution(
    record: Record,
    ad_key: str = "Ad Sales",
    total_key: str = "Sales",
) -> SalesDistribution:
    """Split one period's total sales into ad-driven and organic sales.

    Args:
        record: A single period's metrics.
        ad_key: Metric holding ad-attributed sales.
        total_key: Metric holding total sales.

    Returns:
        `SalesDistribution`; missing or unparseable values count as 0 and a
        zero total yields 0% shares. Organic sales may be negative when ad
        sales exceed the reported total.
    """
    ad = _finite_or_zero(record.get(ad_key))
    total = _finite_or_zero(record.get(total_key))
    organic = total - ad

    if total == 0:
        ad_share = organic_share = 0.0
    else:
        ad_share = ad / total * 100.0
        organic_share = organic / total * 100.0

    return SalesDistribution(
        ad_sales=ad,
        organic_sales=organic,
        total_sales=total,
        ad_share_pct=ad_share,
        organic_share_pct=organic_share,
    )
