from __future__ import annotations

import math
from pathlib import Path

import pandas as pd
import streamlit as st
import altair as alt

from ads_analytics.config import get_settings
from ads_analytics.ingest.load_table import SourceUnavailableError, load_table
from ads_analytics.aggregate.distribution import METRIC_GROUPS, sales_distribution
from ads_analytics.aggregate.payload import aggregate_metrics
from ads_analytics.aggregate.trend import synthetic_trend
from ads_analytics.models import ComparativePayload, TrendSeries
from ads_analytics.transform.values import format_growth, format_value

# =====================================================
# Page config
# =====================================================
st.set_page_config(page_title="Sales Analytics Overview", layout="wide")
st.title("📊 Sales Analytics Overview")

# =====================================================
# Data (read once per file change)
# =====================================================
settings = get_settings()


@st.cache_data(show_spinner=False)
def load_records(path: str, sheet: str | None) -> list[dict]:
    """Cached wrapper around `load_table` keyed by file path and sheet."""
    return load_table(Path(path), sheet)


try:
    records = load_records(str(settings.data_path), settings.sheet_name)
except SourceUnavailableError as exc:  # pragma: no cover - runtime failure handling
    st.error(f"Failed to load metrics data: {exc}")
    st.stop()

payload: ComparativePayload = aggregate_metrics(records, window=settings.trend_window)

if payload.is_empty:
    st.info("No metrics available yet. Add rows to the workbook and reload.")
    st.stop()

# =====================================================
# Helpers
# =====================================================
def trend_for(metric: str) -> TrendSeries:
    """Return the real trend of a metric, or a seeded placeholder."""
    series = payload.trends.get(metric)
    if series is not None and any(math.isfinite(v) for v in series.values):
        return series
    return synthetic_trend(records[-1].get(metric), seed=sum(map(ord, metric)))


def sparkline(metric: str, series: TrendSeries) -> alt.Chart:
    """Small area chart scaled to the series' own bounds."""
    df = pd.DataFrame({"label": series.labels, "value": series.values})
    df["order"] = range(len(df))
    lo, hi = series.min * 0.9, series.max * 1.1
    return (
        alt.Chart(df)
        .mark_area(line=True, opacity=0.3, interpolate="monotone")
        .encode(
            x=alt.X("order:O", axis=None),
            y=alt.Y("value:Q", axis=None, scale=alt.Scale(domain=[min(lo, hi), max(lo, hi)])),
            tooltip=["label:N", alt.Tooltip("value:Q", format=",.2f")],
        )
        .properties(height=70, title=metric)
    )


deltas = {d.label: d for d in payload.deltas}
period = st.radio("Period", ["Current", "Previous"], horizontal=True)
snapshot = payload.current if period == "Current" or not payload.previous else payload.previous

# =====================================================
# SECTION 0 — KPI CARDS
# =====================================================
for group, metrics in METRIC_GROUPS.items():
    available = [m for m in metrics if m in snapshot]
    if not available:
        continue
    st.header(group)
    cols = st.columns(len(available))
    for col, metric in zip(cols, available):
        with col:
            d = deltas.get(metric)
            delta_text = format_growth(d.growth) if d is not None and d.comparable else None
            st.metric(metric.replace("_", " ").upper(), snapshot[metric], delta_text)
            st.altair_chart(sparkline(metric, trend_for(metric)), width="stretch")

st.divider()

# =====================================================
# SECTION 1 — PERIOD-OVER-PERIOD GROWTH
# =====================================================
st.header("📈 Period-over-Period Growth")

if not payload.deltas:
    st.info("At least two periods are needed to compute growth.")
else:
    df_growth = pd.DataFrame(
        [
            {"metric": d.label, "growth": d.growth, "comparable": d.comparable}
            for d in payload.deltas
        ]
    )
    chart_growth = (
        alt.Chart(df_growth)
        .mark_bar()
        .encode(
            x=alt.X("metric:N", sort=None, title=None),
            y=alt.Y("growth:Q", title="Growth (%)"),
            color=alt.condition(alt.datum.growth >= 0, alt.value("#16a34a"), alt.value("#dc2626")),
            tooltip=["metric:N", alt.Tooltip("growth:Q", format="+.1f"), "comparable:N"],
        )
        .properties(height=320)
    )
    st.altair_chart(chart_growth, width="stretch")

    st.dataframe(
        pd.DataFrame(
            [
                {
                    "Metric": d.label,
                    "Current": payload.current.get(d.label, ""),
                    "Previous": payload.previous.get(d.label, ""),
                    "Change": format_growth(d.growth) if d.comparable else "N/A",
                }
                for d in payload.deltas
            ]
        ),
        width="stretch",
        hide_index=True,
    )

st.divider()

# =====================================================
# SECTION 2 — SALES DISTRIBUTION
# =====================================================
st.header("🥧 Sales Distribution")

dist = sales_distribution(records[-1])
if dist.total_sales == 0:
    st.info("Sales data not available for the latest period.")
else:
    df_dist = pd.DataFrame(
        [
            {"segment": "Ad Sales", "sales": dist.ad_sales, "share": dist.ad_share_pct},
            {"segment": "Organic Sales", "sales": dist.organic_sales, "share": dist.organic_share_pct},
        ]
    )
    chart_dist = (
        alt.Chart(df_dist)
        .mark_arc(innerRadius=80)
        .encode(
            theta=alt.Theta("sales:Q"),
            color=alt.Color("segment:N", title=None),
            tooltip=["segment:N", alt.Tooltip("sales:Q", format=",.0f"), alt.Tooltip("share:Q", format=".1f")],
        )
        .properties(height=280)
    )
    c1, c2 = st.columns([2, 1])
    with c1:
        st.altair_chart(chart_dist, width="stretch")
    with c2:
        st.metric("Total Sales", format_value(dist.total_sales))
        st.metric("Ad Sales", format_value(dist.ad_sales), f"{dist.ad_share_pct:.1f}% share", delta_color="off")
        st.metric("Organic Sales", format_value(dist.organic_sales), f"{dist.organic_share_pct:.1f}% share", delta_color="off")

# =====================================================
# Footer
# =====================================================
st.caption(f"Source: {settings.data_path.name} • last {settings.trend_window} periods in trend charts")
