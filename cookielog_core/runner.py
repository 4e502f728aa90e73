"""Single-pass orchestration: stream records into a store, then query it."""
from __future__ import annotations
import logging
import pathlib
from datetime import date
from typing import FrozenSet, Optional

from .config import Settings
from .frequency_store import FrequencyStore
from .ingest_stats import IngestStats
from .line_source import LineSource
from .record_parser import RecordParser

logger = logging.getLogger(__name__)


def run(parser: RecordParser, store: FrequencyStore, target_day: date) -> FrozenSet[str]:
    """Drain the parser into the store and return the most active cookies for ``target_day``."""
    with parser.stats.phase('ingest'):
        for record in parser.records():
            store.add_record(record)
    with parser.stats.phase('query'):
        winners = store.most_frequent_for(target_day)
    logger.info("Ingested %d records (%d malformed lines dropped); %d most active cookie(s) for %s",
                parser.stats.valid, parser.stats.invalid, len(winners), target_day)
    return winners


def most_active_cookies(path: pathlib.Path, target_day: date,
                        settings: Optional[Settings] = None,
                        stats: Optional[IngestStats] = None) -> FrozenSet[str]:
    """Find the most active cookies for ``target_day`` in the log at ``path``.

    The file is closed on every exit path, including early termination and errors.

    Raises:
        SourceError, SchemaValidationError
    """
    settings = settings or Settings()
    cutoff = settings.cutoff_policy.cutoff_for(target_day)
    with LineSource.open(path) as source:
        parser = RecordParser.create(source, settings.expected_header, cutoff,
                                     policy=settings.cutoff_policy, stats=stats)
        return run(parser, FrequencyStore(), target_day)
