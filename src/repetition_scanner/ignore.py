from __future__ import annotations

import re
from typing import Iterable, Iterator, List, Sequence

from .intervals import IgnoreProvider
from .models import Interval
from .source import TextSource

__all__ = [
    "RegexIgnoreProvider",
    "latex_providers",
    "create_providers",
    "PRESETS",
]


class RegexIgnoreProvider:
    """Propose one ignore interval per non-empty match of ``pattern``."""

    def __init__(self, pattern: str | re.Pattern[str], flags: int = 0) -> None:
        if isinstance(pattern, re.Pattern):
            self.pattern = pattern
        else:
            self.pattern = re.compile(pattern, flags)

    def __call__(self, source: TextSource) -> Iterator[Interval]:
        for match in self.pattern.finditer(source.full_text()):
            if match.end() > match.start():
                yield Interval(match.start(), match.end())

    def __repr__(self) -> str:
        return f"RegexIgnoreProvider({self.pattern.pattern!r})"


# Best-effort LaTeX heuristics; ordered so math blocks win over the
# control sequences nested inside them.
LATEX_PATTERNS: tuple[tuple[str, int], ...] = (
    (r"(?<!\\)%[^\n]*", 0),
    (r"\$\$.*?\$\$", re.DOTALL),
    (r"\\\[.*?\\\]", re.DOTALL),
    (r"\\begin\{(equation|align|gather|multline)(\*?)\}.*?\\end\{\1\2\}", re.DOTALL),
    (r"(?<![\\$])\$[^$]+\$", 0),
    (r"\\\(.*?\\\)", re.DOTALL),
    (r"\\(?:label|ref|eqref|cite|begin|end|input|include)\{[^}]*\}", 0),
    (r"\\[A-Za-z@]+\*?", 0),
)


def latex_providers() -> List[IgnoreProvider]:
    """Providers skipping comments, math and control sequences in LaTeX sources."""
    return [RegexIgnoreProvider(pattern, flags) for pattern, flags in LATEX_PATTERNS]


PRESETS = {
    "latex": latex_providers,
    "tex": latex_providers,
}


def create_providers(
    names: Iterable[str] = (), patterns: Sequence[str] = ()
) -> List[IgnoreProvider]:
    """Factory for building ignore providers from preset names and raw patterns."""
    providers: List[IgnoreProvider] = []
    for name in names:
        normalized = name.lower().strip()
        factory = PRESETS.get(normalized)
        if factory is None:
            raise ValueError(f"Unknown ignore preset '{name}'.")
        providers.extend(factory())
    for pattern in patterns:
        try:
            providers.append(RegexIgnoreProvider(pattern))
        except re.error as exc:
            raise ValueError(f"Invalid ignore pattern {pattern!r}: {exc}") from exc
    return providers
