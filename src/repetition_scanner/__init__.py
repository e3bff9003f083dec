"""
repetition_scanner package exports convenience helpers for library consumers.
"""

from __future__ import annotations

from .config import ScannerConfig, config_from_dict, config_from_yaml, load_config
from .decisions import (
    CallableDecisionHandler,
    ContinueAlways,
    Decision,
    DecisionHandler,
    ScriptedDecisionHandler,
)
from .detection import exceeders
from .intervals import IntervalSet
from .models import Finding, Interval, ScanStatus
from .scanner import RepetitionScanner, ScanOutcome, ScanState, scan
from .source import StringTextSource, TextSource

__all__ = [
    "ScannerConfig",
    "config_from_dict",
    "config_from_yaml",
    "load_config",
    "Decision",
    "DecisionHandler",
    "ContinueAlways",
    "CallableDecisionHandler",
    "ScriptedDecisionHandler",
    "exceeders",
    "IntervalSet",
    "Interval",
    "Finding",
    "ScanStatus",
    "RepetitionScanner",
    "ScanOutcome",
    "ScanState",
    "scan",
    "StringTextSource",
    "TextSource",
]

__version__ = "0.1.0"
