"""Per-run ingestion diagnostics: line counters and phase timings."""
from __future__ import annotations
import time
from contextlib import contextmanager
from typing import Dict, Union


class IngestStats:
    """Track what a single ingestion pass read, kept, dropped and how long it took."""

    def __init__(self):
        self.start_time = time.perf_counter()
        self.lines_read = 0
        # Records handed to the consumer; the record that trips the cutoff only counts as read
        self.valid = 0
        self.invalid = 0
        self.stopped_early = False
        self.phases: Dict[str, float] = {}

    @contextmanager
    def phase(self, name: str):
        """Context manager timing one named phase of the run."""
        phase_start = time.perf_counter()
        try:
            yield
        finally:
            self.phases[f"{name}_s"] = round(time.perf_counter() - phase_start, 3)

    @property
    def success_rate(self) -> float:
        """Share of parsed data lines that produced a valid record."""
        parsed = self.valid + self.invalid
        return self.valid / parsed if parsed > 0 else 0.0

    def get_total_time(self) -> float:
        return round(time.perf_counter() - self.start_time, 3)

    def get_summary(self) -> Dict[str, Union[int, float, bool]]:
        summary: Dict[str, Union[int, float, bool]] = {
            'lines_read': self.lines_read,
            'valid': self.valid,
            'invalid': self.invalid,
            'stopped_early': self.stopped_early,
            'success_rate': round(self.success_rate, 4),
        }
        summary.update(self.phases)
        summary['total_s'] = self.get_total_time()
        return summary
