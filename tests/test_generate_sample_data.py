"""Tests for the sample cookie log generator."""
import random
from datetime import date

from generate_sample_data import build_sample_rows, main
from cookielog_core.line_source import LineSource
from cookielog_core.record_parser import RecordParser
from cookielog_core.config import DEFAULT_HEADER


def test_rows_sorted_newest_first():
    rows = build_sample_rows(200, random.Random(7))
    timestamps = [ts for _, ts in rows]
    assert len(rows) == 200
    assert timestamps == sorted(timestamps, reverse=True)


def test_seed_is_reproducible():
    assert build_sample_rows(50, random.Random(1)) == build_sample_rows(50, random.Random(1))


def test_generated_log_parses(tmp_path, capsys):
    out = tmp_path / 'nested' / 'load-test.csv'
    assert main(['--out', str(out), '--rows', '300', '--seed', '3']) == 0
    assert "300 rows" in capsys.readouterr().out
    with LineSource.open(out) as source:
        parser = RecordParser.create(source, DEFAULT_HEADER, date(2018, 1, 1))
        records = list(parser.records())
    assert len(records) == 300
    assert parser.stats.invalid == 0
