"""Header validation and lazy record streaming over a LineSource.

The log is sorted by timestamp, newest first. That lets the parser stop
reading as soon as it meets a record from before the cutoff day: every
line after it is older still.
"""
from __future__ import annotations
import logging
from datetime import date
from typing import Iterator, Optional, Sequence, Tuple

from .config import FIELD_SEPARATOR, CutoffPolicy
from .exceptions import SchemaValidationError
from .ingest_stats import IngestStats
from .line_source import LineSource
from .records import InvalidRecord, ValidRecord, parse_line

logger = logging.getLogger(__name__)


def split_header(line: str) -> list[str]:
    return [col.strip() for col in line.split(FIELD_SEPARATOR)]


class RecordParser:
    """Turns the data lines of a LineSource into valid cookie records.

    Build instances with ``RecordParser.create`` so the header is checked
    before any record is produced.
    """

    def __init__(self, source: LineSource, expected_header: Sequence[str], cutoff: date,
                 policy: CutoffPolicy = CutoffPolicy.INCLUSIVE, stats: Optional[IngestStats] = None):
        self.source = source
        self.expected_header: Tuple[str, ...] = tuple(expected_header)
        self.cutoff = cutoff
        self.policy = policy
        self.stats = stats if stats is not None else IngestStats()
        self._finished = False

    @classmethod
    def create(cls, source: LineSource, expected_header: Sequence[str], cutoff: date,
               policy: CutoffPolicy = CutoffPolicy.INCLUSIVE,
               stats: Optional[IngestStats] = None) -> "RecordParser":
        """Create a parser and consume the header line from ``source``.

        Raises:
            SchemaValidationError: if the source is empty or its header does
                not match ``expected_header`` column for column.
            SourceReadError: if the header line cannot be read.
        """
        parser = cls(source, expected_header, cutoff, policy, stats)
        parser._validate_header()
        return parser

    def _validate_header(self) -> None:
        line = self.source.next_line()
        if line is None:
            raise SchemaValidationError(
                f"No header line found in cookie log {self.source.name}, please check the file"
            )
        found = split_header(line)
        if found != list(self.expected_header):
            raise SchemaValidationError(
                f"Header {found} found in cookie log {self.source.name} "
                f"doesn't match the expected header {list(self.expected_header)}"
            )
        logger.debug("Validated header %s of %s", found, self.source.name)

    def records(self) -> Iterator[ValidRecord]:
        """Yield valid records in source order until end of input or the cutoff.

        Invalid lines are dropped. The first valid record whose day falls
        outside the cutoff ends the stream and no further lines are read.
        The stream is single-pass: once it has ended, later calls yield
        nothing.
        """
        while not self._finished:
            record = parse_line(self.source.next_line())
            if record is None:
                logger.debug("No more data in %s, ending the record stream", self.source.name)
                self._finished = True
                return
            self.stats.lines_read += 1
            if isinstance(record, InvalidRecord):
                self.stats.invalid += 1
                logger.debug("Dropping malformed line %r", record.raw_text)
                continue
            if self.policy.stops_at(record.day, self.cutoff):
                logger.debug("Early exit at %s: past the %s cutoff %s",
                             record, self.policy.value, self.cutoff)
                self.stats.stopped_early = True
                self._finished = True
                return
            self.stats.valid += 1
            yield record
