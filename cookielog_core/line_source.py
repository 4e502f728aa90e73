"""Line-by-line access to a cookie log stream.

A LineSource wraps a text reader (anything with ``readline`` and ``close``)
and hands out one line per call with the line terminator removed. Use it as
a context manager so the reader is released on every exit path.
"""
from __future__ import annotations
import codecs
import io
import logging
import pathlib
from typing import BinaryIO, Optional, TextIO

from .config import DEFAULT_ENCODING
from .exceptions import SourceCloseError, SourceReadError

logger = logging.getLogger(__name__)


def _reader_encoding(encoding: str) -> str:
    # utf-8-sig drops a leading BOM so it never ends up in the header
    return "utf-8-sig" if codecs.lookup(encoding).name == "utf-8" else encoding


class LineSource:
    """Ordered, finite sequence of raw lines read from an underlying stream."""

    def __init__(self, reader: TextIO, name: str = "<stream>"):
        self._reader = reader
        self.name = name
        self._exhausted = False
        self._closed = False

    @classmethod
    def open(cls, path: pathlib.Path, encoding: str = DEFAULT_ENCODING) -> "LineSource":
        """Open a log file for reading.

        Raises:
            SourceReadError: if the file cannot be opened.
        """
        try:
            reader = pathlib.Path(path).open("r", encoding=_reader_encoding(encoding), newline="")
        except (OSError, LookupError) as e:
            raise SourceReadError(f"Unexpected error encountered when opening cookie log {path}: {e}") from e
        return cls(reader, name=str(path))

    @classmethod
    def from_bytes(cls, stream: BinaryIO, encoding: str = DEFAULT_ENCODING, name: str = "<bytes>") -> "LineSource":
        """Wrap a binary stream positioned at the start of the log.

        Raises:
            SourceReadError: if the encoding is unknown.
        """
        try:
            enc = _reader_encoding(encoding)
        except LookupError as e:
            raise SourceReadError(f"Unexpected error encountered when opening cookie log {name}: {e}") from e
        return cls(io.TextIOWrapper(stream, encoding=enc, newline=""), name=name)

    def next_line(self) -> Optional[str]:
        """Return the next line without its terminator, or None at end of input.

        Once None has been returned, every later call returns None without
        touching the reader again.
        """
        if self._exhausted:
            return None
        try:
            line = self._reader.readline()
        except (OSError, ValueError) as e:
            raise SourceReadError(
                f"Unexpected error encountered when reading cookie log {self.name}: {e}"
            ) from e
        if not line:
            self._exhausted = True
            return None
        return line.rstrip("\r\n")

    def close(self) -> None:
        """Release the underlying reader. Later calls are no-ops."""
        if self._closed:
            return
        self._closed = True
        try:
            self._reader.close()
        except (OSError, ValueError) as e:
            raise SourceCloseError(
                f"Unexpected error encountered when closing cookie log {self.name}: {e}"
            ) from e

    @property
    def closed(self) -> bool:
        return self._closed

    def __enter__(self) -> "LineSource":
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        try:
            self.close()
        except SourceCloseError as close_error:
            if exc is None:
                raise
            # Let the in-flight error propagate instead of the close failure
            logger.warning("%s (suppressed while handling %s)", close_error, exc_type.__name__)
        return False
