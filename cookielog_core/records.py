"""Cookie log record parsing.

A data line has a tiny schema:
    <cookie>,<timestamp>

Example:
    AtY0laUfhglK3lC7,2018-12-09T14:19:00+00:00

Malformed lines are not errors: they become InvalidRecord values carrying the
offending text and never count towards any total.
"""
from __future__ import annotations
import logging
import re
from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone
from typing import Optional, Union

from .config import FIELD_SEPARATOR

logger = logging.getLogger(__name__)

# ISO-8601 date-time with a mandatory offset, e.g. 2018-12-09T14:19:00+01:00
TIMESTAMP_REGEX = re.compile(
    r'(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})'
    r'T(?P<hour>\d{2}):(?P<minute>\d{2})'
    r'(?::(?P<second>\d{2})(?:\.(?P<fraction>\d{1,9}))?)?'
    r'(?P<offset>Z|(?P<sign>[+-])(?P<off_hour>\d{2}):(?P<off_minute>\d{2}))',
    re.ASCII,
)


@dataclass(frozen=True)
class ValidRecord:
    identifier: str
    timestamp_utc: datetime

    @property
    def day(self) -> date:
        return day_key(self.timestamp_utc)


@dataclass(frozen=True)
class InvalidRecord:
    raw_text: str


Record = Union[ValidRecord, InvalidRecord]


def day_key(timestamp_utc: datetime) -> date:
    """Calendar day of a UTC timestamp, ignoring time-of-day."""
    return timestamp_utc.date()


def parse_timestamp(raw: str) -> datetime:
    """Parse an offset-aware ISO-8601 timestamp and normalize it to UTC.

    Raises:
        ValueError: if ``raw`` does not match the format or names an
            impossible date, time or offset.
    """
    m = TIMESTAMP_REGEX.fullmatch(raw)
    if not m:
        raise ValueError(f"not an ISO-8601 date-time with offset: {raw!r}")

    if m.group('offset') == 'Z':
        tz = timezone.utc
    else:
        off_minute = int(m.group('off_minute'))
        offset = timedelta(hours=int(m.group('off_hour')), minutes=off_minute)
        if off_minute > 59 or offset > timedelta(hours=18):
            raise ValueError(f"offset out of range: {m.group('offset')}")
        tz = timezone(-offset if m.group('sign') == '-' else offset)

    # Sub-microsecond digits are truncated
    fraction = (m.group('fraction') or '').ljust(6, '0')[:6]
    local = datetime(
        int(m.group('year')), int(m.group('month')), int(m.group('day')),
        int(m.group('hour')), int(m.group('minute')), int(m.group('second') or 0),
        int(fraction), tzinfo=tz,
    )
    return local.astimezone(timezone.utc)


def parse_line(line: Optional[str]) -> Optional[Record]:
    """Parse one data line into a Record.

    Returns None when ``line`` is None (end of input).
    """
    if line is None:
        return None

    # Naive split: a comma inside either field makes the line invalid
    parts = line.split(FIELD_SEPARATOR)
    if len(parts) != 2:
        return InvalidRecord(raw_text=line)

    identifier, raw_ts = parts
    if not identifier.strip():
        return InvalidRecord(raw_text=line)

    try:
        timestamp_utc = parse_timestamp(raw_ts)
    except (ValueError, OverflowError):
        logger.debug("Failed to parse the timestamp in line %r, marking it invalid", line)
        return InvalidRecord(raw_text=line)

    return ValidRecord(identifier=identifier, timestamp_utc=timestamp_utc)
