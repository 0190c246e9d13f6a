"""Command-line interface for the metrics analytics.

Provides subcommands: `metrics`, `growth`, and `distribution`. Each command
is implemented as a `cmd_*` function that accepts an argparse namespace and
prints its JSON result to stdout.
"""
from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter

from ads_analytics.config import get_settings
from ads_analytics.logging_config import configure_logging
from ads_analytics.ingest.load_table import SourceUnavailableError, load_table
from ads_analytics.aggregate.delta import DEFAULT_GROWTH_METRICS, growth_report
from ads_analytics.aggregate.distribution import sales_distribution
from ads_analytics.aggregate.payload import aggregate_metrics
from ads_analytics.models import MetricDelta

log = logging.getLogger(__name__)

_DELTA_LIST = TypeAdapter(list[MetricDelta])


# --------------------------------------------------
# Helpers
# --------------------------------------------------
def _positive_int(text: str) -> int:
    """argparse type for `--window`."""
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {value}")
    return value


def _load(args: argparse.Namespace) -> list[dict[str, Any]]:
    """Load the table named on the command line (or in settings)."""
    s = get_settings()
    path = Path(args.file) if args.file else s.data_path
    sheet = args.sheet if args.sheet else s.sheet_name
    return load_table(path, sheet)


# --------------------------------------------------
# METRICS
# --------------------------------------------------
def cmd_metrics(args: argparse.Namespace) -> None:
    """Print the full comparative payload (snapshots, trends, deltas)."""
    window = args.window if args.window is not None else get_settings().trend_window
    payload = aggregate_metrics(_load(args), window=window)
    print(payload.model_dump_json(by_alias=True, indent=2))


# --------------------------------------------------
# GROWTH
# --------------------------------------------------
def cmd_growth(args: argparse.Namespace) -> None:
    """Print growth of the selected metrics between the last two periods."""
    metrics = args.metric or list(DEFAULT_GROWTH_METRICS)
    deltas = growth_report(_load(args), metrics)
    print(_DELTA_LIST.dump_json(deltas, by_alias=True, indent=2).decode("utf-8"))


# --------------------------------------------------
# DISTRIBUTION
# --------------------------------------------------
def cmd_distribution(args: argparse.Namespace) -> None:
    """Print the ad vs organic sales split of the most recent period."""
    table = _load(args)
    if not table:
        print(json.dumps({}))
        return
    dist = sales_distribution(table[-1], ad_key=args.ad_key, total_key=args.total_key)
    print(dist.model_dump_json(indent=2))


# --------------------------------------------------
# CLI
# --------------------------------------------------
def build_parser() -> argparse.ArgumentParser:
    """Build and return the top-level argument parser for the CLI.

    Returns:
        Configured argparse.ArgumentParser instance.
    """
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--file", default=None, help="Workbook or CSV (default: ADS_DATA_PATH)")
    common.add_argument("--sheet", default=None, help="Worksheet name (default: first sheet)")

    p = argparse.ArgumentParser(prog="ads_analytics")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_metrics = sub.add_parser("metrics", parents=[common])
    p_metrics.add_argument("--window", type=_positive_int, default=None)

    p_growth = sub.add_parser("growth", parents=[common])
    p_growth.add_argument("--metric", action="append", default=None)

    p_dist = sub.add_parser("distribution", parents=[common])
    p_dist.add_argument("--ad-key", default="Ad Sales")
    p_dist.add_argument("--total-key", default="Sales")

    return p


def main(argv: list[str] | None = None) -> None:
    """CLI entry point: parse args, configure logging and dispatch commands."""
    args = build_parser().parse_args(argv)
    configure_logging(get_settings().log_path)

    try:
        if args.cmd == "metrics":
            cmd_metrics(args)
        elif args.cmd == "growth":
            cmd_growth(args)
        elif args.cmd == "distribution":
            cmd_distribution(args)
        else:
            raise SystemExit(2)
    except SourceUnavailableError as e:
        log.error("Failed to load metrics data: %s", e)
        raise SystemExit(1) from e


if __name__ == "__main__":
    main()
