"""Spreadsheet loading utilities.

`load_table` reads the ads & sales workbook (or a CSV export of it) with
pandas and returns the ordered list of records the analytics core expects.
Any failure to read the source surfaces as a single `SourceUnavailableError`.
"""

from __future__ import annotations

import logging
import zipfile
from datetime import date, datetime
from pathlib import Path
from typing import Any

import pandas as pd

log = logging.getLogger(__name__)

EXCEL_SUFFIXES = {".xlsx", ".xlsm", ".xls"}


class SourceUnavailableError(RuntimeError):
    """Raised when the metrics table cannot be read."""


def _normalize_cell(value: Any) -> Any:
    """Convert pandas/numpy cell values into plain Python scalars.

    Blank cells become None and dates become ISO date strings.
    """
    if value is None:
        return None
    if not isinstance(value, str) and pd.isna(value):
        return None
    if isinstance(value, (datetime, date)):
        return value.strftime("%Y-%m-%d")
    if hasattr(value, "item"):
        # numpy scalar
        return value.item()
    return value


def _read_frame(path: Path, sheet_name: str | None) -> pd.DataFrame:
    suffix = path.suffix.lower()
    if suffix in EXCEL_SUFFIXES:
        return pd.read_excel(path, sheet_name=sheet_name if sheet_name is not None else 0)
    if suffix == ".csv":
        return pd.read_csv(path)
    raise SourceUnavailableError(f"Unsupported metrics file type: {path.name}")


def load_table(path: Path, sheet_name: str | None = None) -> list[dict[str, Any]]:
    """Read the metrics table into a list of records.

    Args:
        path: Workbook (`.xlsx`, `.xlsm`, `.xls`) or `.csv` file.
        sheet_name: Worksheet to read; defaults to the first sheet. Ignored
            for CSV files.

    Returns:
        Records in file order (expected to be chronologically ascending),
        one dict per row keyed by column header.

    Raises:
        SourceUnavailableError: if the file is missing, unreadable, or the
            sheet does not exist.
    """
    if not path.exists():
        raise SourceUnavailableError(f"Metrics file not found: {path}")

    log.info("Reading metrics table: %s", path)
    try:
        pdf = _read_frame(path, sheet_name)
    except SourceUnavailableError:
        raise
    except (OSError, ValueError, ImportError, zipfile.BadZipFile) as e:
        raise SourceUnavailableError(f"Failed to read metrics file {path}: {e}") from e

    pdf = pdf.dropna(how="all")
    pdf.columns = [str(c).strip() for c in pdf.columns]

    records = [
        {k: _normalize_cell(v) for k, v in row.items()}
        for row in pdf.to_dict(orient="records")
    ]
    log.info("Loaded %d records with %d columns", len(records), len(pdf.columns))
    return records
