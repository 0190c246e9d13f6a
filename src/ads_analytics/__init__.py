"""ads_analytics package.

Contains modules for loading an ordered table of period-indexed ad & sales
metrics, parsing and formatting metric values, and deriving the comparative
analytics (period-over-period growth, trailing trend windows) consumed by the
CLI and the Streamlit dashboard.

Architecture:
- Table (spreadsheet rows) → Period Selector → Delta / Trend → Payload
- pandas is used to read the spreadsheet
- Pydantic models describe the payload handed to presentation
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
