"""Configuration helpers and Settings container.

This module provides a small `Settings` dataclass and `get_settings` which
reads the service-layer environment variables (data file, worksheet, trend
window and log path). The analytics core never reads configuration itself;
callers pass these values in.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import os

from dotenv import load_dotenv

# Explicitly load .env from project root
PROJECT_ROOT = Path(__file__).resolve().parents[2]
load_dotenv(PROJECT_ROOT / ".env")

DEFAULT_DATA_PATH = "data/ads_and_sales_comparison_filtered.xlsx"
DEFAULT_TREND_WINDOW = 12


@dataclass(frozen=True)
class Settings:
    """Container for service configuration read from the environment.

    Attributes:
        data_path: Spreadsheet (or CSV) holding the ordered metrics table.
        sheet_name: Worksheet to read; ``None`` means the first sheet.
        trend_window: Number of trailing records used for trend charts.
        log_path: File that receives log output in addition to stderr.
    """
    data_path: Path
    sheet_name: str | None
    trend_window: int
    log_path: Path


def _read_window(raw: str) -> int:
    """Parse `ADS_TREND_WINDOW`, raising `RuntimeError` on bad input."""
    try:
        window = int(raw)
    except ValueError:
        raise RuntimeError(
            f"ADS_TREND_WINDOW must be an integer, got {raw!r}."
        ) from None
    if window < 1:
        raise RuntimeError(f"ADS_TREND_WINDOW must be >= 1, got {window}.")
    return window


def get_settings() -> Settings:
    """Read environment variables and return a frozen `Settings` object.

    Raises:
        RuntimeError: if `ADS_TREND_WINDOW` is not a positive integer.
    """
    data_path = Path(os.getenv("ADS_DATA_PATH", DEFAULT_DATA_PATH))
    sheet_name = os.getenv("ADS_SHEET_NAME", "").strip() or None
    trend_window = _read_window(
        os.getenv("ADS_TREND_WINDOW", str(DEFAULT_TREND_WINDOW)).strip()
    )
    log_path = Path(os.getenv("ADS_LOG_PATH", "logs/ads_analytics.log"))

    return Settings(
        data_path=data_path,
        sheet_name=sheet_name,
        trend_window=trend_window,
        log_path=log_path,
    )
