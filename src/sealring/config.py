"""
Configuration for sealring.

Settings live in a small YAML file. Every key is optional; missing keys use
the defaults below.

Example ``sealring.yaml``::

    unit: mm
    default_company_name: ACME Seals Ltd.
    history_path: ~/.sealring/history.json
    history_limit: 100
    output_dir: drawings
    detail_a_uses_record_angle: false
    log_level: INFO
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any

import yaml

from .exceptions import ConfigError

DEFAULT_HISTORY_PATH = "~/.sealring/history.json"
DEFAULT_HISTORY_LIMIT = 100
DEFAULT_TOLERANCE_NOTE = (
    "Unless otherwise specified, tolerances per JIS B 0405 medium grade (m)."
)


@dataclass
class DrawingConfig:
    """
    Drawing and application settings.

    Attributes:
        unit: Length unit appended to formatted dimensions
        default_company_name: Company name used when a record has none
        tolerance_grade_note: General tolerance note printed on every sheet
        history_path: JSON file holding the drawing history
        history_limit: Number of most recent drawings kept in the history
        output_dir: Default directory for exported drawings
        detail_a_uses_record_angle: Show the record's spiral angle in the
            spiral "Detail A" inset instead of the standard 30°±5°
        log_level: Root log level for the command line tool
    """
    unit: str = "mm"
    default_company_name: str = ""
    tolerance_grade_note: str = DEFAULT_TOLERANCE_NOTE
    history_path: str = DEFAULT_HISTORY_PATH
    history_limit: int = DEFAULT_HISTORY_LIMIT
    output_dir: str = "."
    detail_a_uses_record_angle: bool = False
    log_level: str = "WARNING"

    def __post_init__(self):
        if self.history_limit < 1:
            raise ConfigError(f"history_limit must be at least 1, got {self.history_limit}")

    @property
    def resolved_history_path(self) -> Path:
        return Path(self.history_path).expanduser()

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> DrawingConfig:
        data = data or {}
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown configuration keys: {', '.join(unknown)}")
        for key, value in data.items():
            expected = _FIELD_TYPES[key]
            # bool is an int subclass
            if not isinstance(value, expected) or (expected is int and isinstance(value, bool)):
                raise ConfigError(
                    f"{key} must be of type {expected.__name__}, got {type(value).__name__}: {value!r}"
                )
        return cls(**data)

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> DrawingConfig:
        """Load settings from a YAML file."""
        try:
            with open(yaml_path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Cannot read config {yaml_path}: {e}") from e
        if data is not None and not isinstance(data, dict):
            raise ConfigError(f"Config {yaml_path} must be a mapping")
        return cls.from_dict(data)

    def to_yaml(self, yaml_path: str | Path) -> None:
        """Save settings to a YAML file."""
        with open(yaml_path, "w", encoding="utf-8") as f:
            yaml.dump(asdict(self), f, default_flow_style=False, sort_keys=False)


_FIELD_TYPES: dict[str, type] = {
    "unit": str,
    "default_company_name": str,
    "tolerance_grade_note": str,
    "history_path": str,
    "history_limit": int,
    "output_dir": str,
    "detail_a_uses_record_angle": bool,
    "log_level": str,
}


def setup_logging(level: str = "WARNING") -> None:
    """Configure root logging for command line use."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    )
