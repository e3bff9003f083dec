from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, List, Mapping, MutableMapping

import yaml


@dataclass(slots=True)
class ScannerConfig:
    """Configuration options for the repetition scanner."""

    window_size: int = 100
    min_occurrence: int = 2
    min_word_length: int = 4
    # Evaluate the trailing window that cannot be filled before the range end.
    scan_partial_windows: bool = False
    ignore_presets: List[str] = field(default_factory=list)
    ignore_patterns: List[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable dictionary representation of the configuration."""
        return dict(asdict(self))

    def validate(self) -> None:
        """Raise ValueError when a numeric option is out of range."""
        for name in ("window_size", "min_occurrence", "min_word_length"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool) or value < 1:
                raise ValueError(f"{name} must be a positive integer, got {value!r}.")


def _build_kwargs(data: Mapping[str, Any]) -> dict[str, Any]:
    allowed = {field.name for field in fields(ScannerConfig)}
    kwargs = {key: data[key] for key in data if key in allowed}
    for key in ("ignore_presets", "ignore_patterns"):
        value = kwargs.get(key)
        if isinstance(value, str):
            kwargs[key] = [value]
        elif value is None and key in kwargs:
            kwargs[key] = []
    return kwargs


def config_from_dict(data: Mapping[str, Any] | None) -> ScannerConfig:
    """Build a ScannerConfig from a dictionary-like input."""
    if data is None:
        return ScannerConfig()
    return ScannerConfig(**_build_kwargs(data))


def config_from_yaml(path: str | Path) -> ScannerConfig:
    """Load configuration from a YAML file."""
    contents = Path(path).read_text(encoding="utf-8")
    parsed = yaml.safe_load(contents) or {}
    if not isinstance(parsed, MutableMapping):
        raise ValueError("Configuration YAML must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> ScannerConfig:
    """Load configuration from YAML when provided, otherwise return defaults."""
    if path is None:
        return ScannerConfig()
    return config_from_yaml(path)
