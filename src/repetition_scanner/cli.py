from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List, Tuple, TypedDict

import typer
import yaml

from .config import ScannerConfig, load_config
from .decisions import ContinueAlways, Decision, DecisionHandler
from .models import Report, ScanStatus
from .scanner import RepetitionScanner, ScanOutcome
from .source import TextSource, load_text_source

app = typer.Typer(help="Repetition Scanner CLI.", no_args_is_help=True)

# Characters of surrounding text shown around an occurrence in interactive mode.
CONTEXT_CHARS = 40


class ReportPayload(TypedDict):
    word: str
    count: int
    window_start: int
    window_end: int
    positions: List[int]
    lines: List[int]


class ScanSummary(TypedDict):
    file: str
    status: str
    position: int | None
    findings: List[ReportPayload]


class ConsoleDecisionHandler(DecisionHandler):
    """Shows each occurrence in context and asks whether to keep going."""

    def __init__(self, source: TextSource, context_chars: int = CONTEXT_CHARS) -> None:
        self._source = source
        self._context_chars = context_chars

    def decide(self, word: str, position: int) -> Decision:
        line, column = _line_and_column(self._source, position)
        start = max(0, position - self._context_chars)
        end = min(len(self._source), position + len(word) + self._context_chars)
        before = self._source.substring(start, position)
        match = self._source.substring(position, position + len(word))
        after = self._source.substring(position + len(word), end)
        typer.echo(f"\nRepeated word '{word}' at line {line}, column {column}:")
        typer.echo(
            _one_line(before)
            + typer.style(match, fg=typer.colors.RED, bold=True)
            + _one_line(after)
        )
        if typer.confirm("Continue?", default=True):
            return Decision.CONTINUE
        return Decision.STOP


@app.command()
def scan(
    input_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=False, file_okay=True
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    window_size: int | None = typer.Option(
        None, "--window-size", "-w", help="Number of words considered together."
    ),
    min_occurrence: int | None = typer.Option(
        None, "--min-occurrence", "-n", help="Minimum repeat count to flag."
    ),
    min_word_length: int | None = typer.Option(
        None, "--min-word-length", "-l", help="Shortest word considered eligible."
    ),
    partial_windows: bool | None = typer.Option(
        None,
        "--partial-windows/--no-partial-windows",
        help="Also check the trailing window that cannot be filled.",
    ),
    ignore_preset: List[str] = typer.Option(
        [], "--ignore-preset", help="Ignore-region preset to apply (e.g., 'latex')."
    ),
    ignore_pattern: List[str] = typer.Option(
        [], "--ignore-pattern", help="Regular expression whose matches are skipped."
    ),
    begin: int = typer.Option(0, "--begin", help="First character offset to scan."),
    end: int | None = typer.Option(
        None, "--end", help="Character offset where scanning stops (exclusive)."
    ),
    interactive: bool = typer.Option(
        False,
        "--interactive/--no-interactive",
        help="Prompt after each occurrence instead of printing a JSON report.",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Scan a text file for words repeated within a sliding window."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)
    cfg = load_config(config)
    _apply_scan_overrides(
        cfg,
        window_size,
        min_occurrence,
        min_word_length,
        partial_windows,
        ignore_preset,
        ignore_pattern,
    )
    source = load_text_source(input_path)
    handler: DecisionHandler = (
        ConsoleDecisionHandler(source) if interactive else ContinueAlways()
    )
    try:
        scanner = RepetitionScanner(cfg, handler)
        outcome = scanner.scan(source, begin, end)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc

    if outcome.status is ScanStatus.INVALID_RANGE:
        raise typer.BadParameter(
            f"Invalid range: --end ({end}) must be greater than --begin ({begin})."
        )

    if interactive:
        if outcome.aborted and outcome.position is not None:
            line, column = _line_and_column(source, outcome.position)
            typer.echo(
                f"Stopped at position {outcome.position} (line {line}, column {column})."
            )
        else:
            typer.echo(f"Scan completed with {len(outcome.reports)} finding(s).")
        return

    typer.echo(json.dumps(_build_summary(input_path, source, outcome), indent=2))


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = ScannerConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False))


def main() -> None:
    app()


def _apply_scan_overrides(
    config: ScannerConfig,
    window_size: int | None,
    min_occurrence: int | None,
    min_word_length: int | None,
    partial_windows: bool | None,
    ignore_presets: List[str],
    ignore_patterns: List[str],
) -> None:
    """Apply CLI overrides to scanner config fields when provided."""
    if window_size is not None:
        config.window_size = window_size
    if min_occurrence is not None:
        config.min_occurrence = min_occurrence
    if min_word_length is not None:
        config.min_word_length = min_word_length
    if partial_windows is not None:
        config.scan_partial_windows = partial_windows
    # Presets and patterns given on the command line extend the config file.
    config.ignore_presets = list(config.ignore_presets) + list(ignore_presets)
    config.ignore_patterns = list(config.ignore_patterns) + list(ignore_patterns)


def _build_summary(path: Path, source: TextSource, outcome: ScanOutcome) -> ScanSummary:
    """Create a JSON-serializable summary of the scan."""
    return {
        "file": str(path),
        "status": outcome.status.value,
        "position": outcome.position,
        "findings": [_report_dict(source, report) for report in outcome.reports],
    }


def _report_dict(source: TextSource, report: Report) -> ReportPayload:
    return {
        "word": report.word,
        "count": report.count,
        "window_start": report.window_start,
        "window_end": report.window_end,
        "positions": list(report.positions),
        "lines": [_line_and_column(source, pos)[0] for pos in report.positions],
    }


def _line_and_column(source: TextSource, position: int) -> Tuple[int, int]:
    """Return the 1-based line and column of ``position``."""
    preceding = source.substring(0, position)
    line = preceding.count("\n") + 1
    column = position - (preceding.rfind("\n") + 1) + 1
    return line, column


def _one_line(text: str) -> str:
    return " ".join(text.split("\n"))


if __name__ == "__main__":
    main()
