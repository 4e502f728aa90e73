#!/usr/bin/env python
"""Generate a sorted sample cookie log for load and functional testing.

Usage:
  python generate_sample_data.py --out test-data/load-test.csv --rows 1000000
"""
from __future__ import annotations
import argparse, pathlib, random
from typing import List, Optional, Tuple

from cookielog_core.config import DEFAULT_HEADER, FIELD_SEPARATOR

COOKIES = [
    "AtY0laUfhglK3lC7", "SAZuXPGUrfbcn5UA", "5UAVanZf6UtGyKVS", "4sMM2LxV07bPJzwf",
    "fbcn5UAVanZf6UtG", "HbZ0ZHVpSjCFk3Wa", "qDrwPgmuFJaxt2PE", "8xYHIASHaBa79xzf",
    "9IGuNaGAAZxjaAxT", "ZwHn0BBQ2mYaOoYk", "Pr2NOmgTZ8mSrmDa", "m7Kpqp5zPySMmXkV",
]

TIMESTAMPS = [
    "2018-12-09T14:19:00+00:00", "2018-12-09T10:13:00+00:00", "2018-12-09T07:25:00+00:00",
    "2018-12-09T06:19:00+00:00", "2018-12-08T22:03:00+00:00", "2018-12-08T21:30:00+00:00",
    "2018-12-08T09:30:00+00:00", "2018-12-07T23:30:00+00:00", "2018-12-07T06:19:00+00:00",
    "2018-12-06T14:19:00+00:00", "2018-12-05T08:45:00+00:00", "2018-12-01T12:00:00+00:00",
]


def build_sample_rows(count: int, rng: random.Random) -> List[Tuple[str, str]]:
    """Random (cookie, timestamp) rows sorted newest first."""
    rows = [(rng.choice(COOKIES), rng.choice(TIMESTAMPS)) for _ in range(count)]
    # All pool timestamps share the +00:00 offset, so string order is time order
    rows.sort(key=lambda r: r[1], reverse=True)
    return rows


def write_sample_log(out_file: pathlib.Path, rows: List[Tuple[str, str]]):
    out_file.parent.mkdir(parents=True, exist_ok=True)
    with out_file.open('w', encoding='utf-8', newline='') as f:
        f.write(FIELD_SEPARATOR.join(DEFAULT_HEADER) + '\n')
        for cookie, ts in rows:
            f.write(f"{cookie}{FIELD_SEPARATOR}{ts}\n")


def main(argv: Optional[list[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Generate a sample cookie log")
    ap.add_argument('--out', type=pathlib.Path, default=pathlib.Path('test-data/load-test.csv'))
    ap.add_argument('--rows', type=int, default=1000)
    ap.add_argument('--seed', type=int, default=None, help='Seed for reproducible output')
    args = ap.parse_args(argv)
    if args.rows < 0:
        ap.error('--rows must be non-negative')
    rows = build_sample_rows(args.rows, random.Random(args.seed))
    write_sample_log(args.out, rows)
    print(f"Wrote {args.out} ({len(rows)} rows)")
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
