"""Pydantic models for the comparative analytics payload.

These models define the shapes handed from the analytics core to the
presentation layer (CLI JSON output and the Streamlit dashboard).
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

Scalar = float | int | str | None


class TrendSeries(BaseModel):
    """Labeled numeric series with bounds, used for trend charts.

    Attributes:
        values: Parsed metric values in chronological order (NaN when a
            period has no usable value).
        labels: Period labels parallel to `values`.
        max: Largest finite entry of `values` (0.0 when there is none).
        min: Smallest finite entry of `values` (0.0 when there is none).
    """
    model_config = ConfigDict(extra="forbid", frozen=True)
    values: list[float]
    labels: list[str]
    max: float
    min: float

    @model_validator(mode="after")
    def _check_lengths(self) -> "TrendSeries":
        if len(self.values) != len(self.labels):
            raise ValueError(
                f"values and labels differ in length ({len(self.values)} != {len(self.labels)})"
            )
        if self.min > self.max:
            raise ValueError(f"min {self.min} exceeds max {self.max}")
        return self


class MetricDelta(BaseModel):
    """Period-over-period change for one metric.

    `comparable` is False when the previous period offers no usable baseline
    (zero or unparseable); `growth` is then reported as 0.0.
    """
    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)
    label: str
    growth: float
    value: Scalar = None
    previous_value: Scalar = Field(default=None, alias="previousValue")
    comparable: bool = True


class ComparativePayload(BaseModel):
    """Aggregator output: formatted snapshots, trends and deltas."""
    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)
    current: dict[str, str] = Field(default_factory=dict, alias="Current")
    previous: dict[str, str] = Field(default_factory=dict, alias="Previous")
    trends: dict[str, TrendSeries] = Field(default_factory=dict)
    deltas: list[MetricDelta] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.current


class SalesDistribution(BaseModel):
    """Ad vs organic split of total sales for one period."""
    model_config = ConfigDict(extra="forbid", frozen=True)
    ad_sales: float
    organic_sales: float
    total_sales: float
    ad_share_pct: float
    organic_share_pct: float
