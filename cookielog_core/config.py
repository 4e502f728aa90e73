"""Configuration constants and utilities for cookie log processing."""
from __future__ import annotations
import yaml
from dataclasses import dataclass
from datetime import date, timedelta
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple

from .exceptions import ConfigError


# Column names expected on the first line of every log
DEFAULT_HEADER: Tuple[str, ...] = ("cookie", "timestamp")

FIELD_SEPARATOR = ","

DEFAULT_ENCODING = "utf-8"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class CutoffPolicy(Enum):
    """How the cutoff day bounds a descending-time ingestion pass.

    INCLUSIVE keeps records on the cutoff day and stops at the first record
    from an earlier day. EXCLUSIVE keeps only records strictly after the
    cutoff day and stops at the first record on or before it.
    """
    INCLUSIVE = "inclusive"
    EXCLUSIVE = "exclusive"

    def stops_at(self, day: date, cutoff: date) -> bool:
        if self is CutoffPolicy.INCLUSIVE:
            return day < cutoff
        return day <= cutoff

    def cutoff_for(self, target_day: date) -> date:
        """Cutoff that keeps every record from ``target_day`` onwards."""
        if self is CutoffPolicy.INCLUSIVE:
            return target_day
        return target_day - timedelta(days=1)

    @classmethod
    def all_values(cls) -> list[str]:
        return [policy.value for policy in cls]


@dataclass(frozen=True)
class Settings:
    expected_header: Tuple[str, ...] = DEFAULT_HEADER
    cutoff_policy: CutoffPolicy = CutoffPolicy.INCLUSIVE
    log_level: str = "WARNING"

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> "Settings":
        """Build settings from a parsed YAML mapping.

        Raises:
            ConfigError: on unknown keys or invalid values.
        """
        unknown = set(raw) - {"expected_header", "cutoff_policy", "log_level"}
        if unknown:
            raise ConfigError(f"Unknown settings keys: {sorted(unknown)}")

        kwargs: Dict[str, Any] = {}

        if "expected_header" in raw:
            header = raw["expected_header"]
            if (not isinstance(header, (list, tuple)) or not header
                    or not all(isinstance(col, str) and col.strip() for col in header)):
                raise ConfigError(
                    f"expected_header must be a non-empty list of column names, got {header!r}"
                )
            kwargs["expected_header"] = tuple(col.strip() for col in header)

        if "cutoff_policy" in raw:
            try:
                kwargs["cutoff_policy"] = CutoffPolicy(str(raw["cutoff_policy"]).lower())
            except ValueError as e:
                raise ConfigError(
                    f"cutoff_policy must be one of {CutoffPolicy.all_values()}, "
                    f"got {raw['cutoff_policy']!r}"
                ) from e

        if "log_level" in raw:
            level = str(raw["log_level"]).upper()
            if level not in LOG_LEVELS:
                raise ConfigError(f"log_level must be one of {list(LOG_LEVELS)}, got {raw['log_level']!r}")
            kwargs["log_level"] = level

        return cls(**kwargs)


def load_settings(cfg_path: Optional[Path]) -> Settings:
    """Load settings from a YAML file; ``None`` yields the defaults."""
    if cfg_path is None:
        return Settings()
    try:
        with cfg_path.open("r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
    except OSError as e:
        raise ConfigError(f"Failed to read settings file {cfg_path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Settings file {cfg_path} is not valid YAML: {e}") from e
    if not isinstance(raw, dict):
        raise ConfigError(f"Settings file {cfg_path} must contain a mapping at the top level")
    return Settings.from_mapping(raw)
