"""Command line interface for rendering cardholder reports from a record file."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from tier_statements.config import settings
from tier_statements.domain.parser import ingest_lines
from tier_statements.infrastructure.observability.logging import setup_logging
from tier_statements.reports.formatter import render_all_reports

REPORT_CHOICES = {
    "original": ["original"],
    "name": ["by_name"],
    "balance": ["by_balance"],
    "invalid": ["invalid"],
    "all": ["original", "by_name", "by_balance", "invalid"],
}


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="tier-statements",
        description="Compute statements and reward points for a cardholder record file",
    )
    parser.add_argument("path", type=Path, help="Semicolon-delimited record file")
    parser.add_argument(
        "--report",
        choices=sorted(REPORT_CHOICES),
        default="all",
        help="Which report to print (default: all four)",
    )
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        help="Log level for the JSON logs written to stderr",
    )
    return parser.parse_args(argv)


def run(path: Path, report: str = "all") -> str:
    """Read the record file and return the selected report text"""
    with path.open(encoding="utf-8") as handle:
        collection = ingest_lines(handle)

    reports = render_all_reports(collection, settings.currency_symbol)
    selected: List[str] = [reports[key] for key in REPORT_CHOICES[report]]
    return "\n\n".join(selected)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    setup_logging(args.log_level.upper(), settings.service_name)

    try:
        output = run(args.path, args.report)
    except (OSError, UnicodeDecodeError) as e:
        detail = getattr(e, "strerror", None) or e
        logging.error("Cannot read record file", extra={"path": str(args.path), "error": str(e)})
        print(f"tier-statements: cannot read {args.path}: {detail}", file=sys.stderr)
        return 1

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
