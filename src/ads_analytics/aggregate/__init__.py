"""Comparative analytics over the ordered metrics table.

This package selects the current/previous periods and the trailing window,
computes period-over-period growth, builds trend series for charting and
assembles the payload consumed by the CLI and the dashboard.
"""
