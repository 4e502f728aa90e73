#!/usr/bin/env python
"""Print the most active cookie(s) for a day from a cookie log.

Usage examples:
  python most_active_cookie.py -f cookie_log.csv -d 2018-12-09

  # Machine-readable output with run diagnostics
  python most_active_cookie.py -f cookie_log.csv -d 2018-12-09 --json

  # Custom header / cutoff policy / log level
  python most_active_cookie.py -f cookie_log.csv -d 2018-12-09 --config cookielog.yaml

Exit codes:
  0 success (including a day with no cookies, which prints nothing)
  1 the log could not be processed
"""
from __future__ import annotations
import argparse, datetime, json, logging, os, pathlib, sys
from typing import Optional

from cookielog_core.config import load_settings
from cookielog_core.exceptions import CookieLogError, FileProcessingError
from cookielog_core.ingest_stats import IngestStats
from cookielog_core.runner import most_active_cookies

logger = logging.getLogger("cookielog")


def parse_day(value: str) -> datetime.date:
    try:
        return datetime.date.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid date {value!r}, expected YYYY-MM-DD")


def check_log_file(path: pathlib.Path) -> pathlib.Path:
    """Make sure ``path`` names a readable regular file."""
    if not path.exists():
        raise FileProcessingError(f"The provided log file {path} doesn't exist.")
    if path.is_dir():
        raise FileProcessingError(f"The provided log file {path} is actually a directory.")
    if not os.access(path, os.R_OK):
        raise FileProcessingError(
            f"The provided log file {path} is not accessible, please check file permissions and try again."
        )
    return path


def print_result(winners, day: datetime.date, stats: IngestStats, use_json: bool):
    if use_json:
        print(json.dumps({
            'date': day.isoformat(),
            'cookies': sorted(winners),
            'stats': stats.get_summary(),
        }, indent=2))
        return
    for cookie in sorted(winners):
        print(cookie)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="most-active-cookie",
        description="Parse a cookie log and print the most active cookie(s) for a given day",
    )
    p.add_argument('-f', '--file', dest='log_file', type=pathlib.Path, required=True,
                   help='Cookie log file path')
    p.add_argument('-d', '--date', dest='day', type=parse_day, required=True,
                   help='Day (YYYY-MM-DD, UTC) to report the most active cookie(s) for')
    p.add_argument('--config', type=pathlib.Path, default=None,
                   help='YAML settings file (expected_header, cutoff_policy, log_level)')
    p.add_argument('--json', action='store_true', help='Print JSON with cookies and run stats')
    p.add_argument('-v', '--verbose', action='store_true', help='Debug logging on stderr')
    return p


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        settings = load_settings(args.config)
        logging.basicConfig(
            level=logging.DEBUG if args.verbose else getattr(logging, settings.log_level),
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            stream=sys.stderr,
        )
        logger.debug("Parsed arguments -- file=%s, date=%s", args.log_file, args.day)
        stats = IngestStats()
        winners = most_active_cookies(check_log_file(args.log_file), args.day, settings, stats)
    except CookieLogError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("Interrupted", file=sys.stderr)
        return 1
    if not winners:
        logger.info("No cookies found for %s", args.day)
    print_result(winners, args.day, stats, args.json)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
