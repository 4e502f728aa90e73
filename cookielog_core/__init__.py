"""Cookie log core: stream a descending-time cookie log and find the most active cookies per day."""

from .line_source import LineSource
from .record_parser import RecordParser
from .frequency_store import FrequencyStore
from .records import ValidRecord, InvalidRecord, parse_line
from .runner import run, most_active_cookies

__all__ = [
    "LineSource",
    "RecordParser",
    "FrequencyStore",
    "ValidRecord",
    "InvalidRecord",
    "parse_line",
    "run",
    "most_active_cookies",
]
