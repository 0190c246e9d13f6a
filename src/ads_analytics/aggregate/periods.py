"""Selection of the current, previous and trailing-window records."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

Record = Mapping[str, Any]

DATE_KEY = "Date"
DEFAULT_WINDOW = 12


@dataclass(frozen=True)
class PeriodSlice:
    """Records picked out of a chronologically ordered table.

    Attributes:
        current: Most recent record, or None for an empty table.
        previous: Second most recent record, or None with fewer than 2 records.
        trailing_window: Last N records in chronological order.
    """
    current: Record | None
    previous: Record | None
    trailing_window: tuple[Record, ...]

    @property
    def has_baseline(self) -> bool:
        return self.previous is not None


def select_periods(table: Sequence[Record], window: int = DEFAULT_WINDOW) -> PeriodSlice:
    """Split a table into current, previous and trailing-window records.

    Args:
        table: Records in ascending chronological order (last = most recent).
        window: Size of the trailing window; a shorter table is used whole.

    Returns:
        A `PeriodSlice`. The table itself is not modified.

    Raises:
        ValueError: if `window` is smaller than 1.
    """
    if window < 1:
        raise ValueError(f"window must be >= 1, got {window}")

    current = table[-1] if len(table) >= 1 else None
    previous = table[-2] if len(table) >= 2 else None
    return PeriodSlice(
        current=current,
        previous=previous,
        trailing_window=tuple(table[-window:]),
    )


def metric_keys(record: Record | None) -> list[str]:
    """Return the metric names of a record, i.e. every key except `Date`."""
    if record is None:
        return []
    return [k for k in record.keys() if k != DATE_KEY]
