from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Callable, Iterable, List, Tuple


class Decision(str, Enum):
    CONTINUE = "continue"
    STOP = "stop"


class DecisionHandler(ABC):
    """Abstract interface asked whether to keep scanning after each occurrence."""

    @abstractmethod
    def decide(self, word: str, position: int) -> Decision:
        """Return the verdict for the occurrence of ``word`` at ``position``."""
        raise NotImplementedError


class ContinueAlways(DecisionHandler):
    """Accepts every occurrence; used for batch reports."""

    def decide(self, word: str, position: int) -> Decision:
        return Decision.CONTINUE


class CallableDecisionHandler(DecisionHandler):
    """Adapt an arbitrary callable into the DecisionHandler interface."""

    def __init__(self, func: Callable[[str, int], Decision]) -> None:
        self._func = func

    def decide(self, word: str, position: int) -> Decision:
        return self._func(word, position)


class ScriptedDecisionHandler(DecisionHandler):
    """Replays a fixed sequence of verdicts, then falls back to ``default``."""

    def __init__(
        self, decisions: Iterable[Decision], default: Decision = Decision.CONTINUE
    ) -> None:
        self._pending: List[Decision] = list(decisions)
        self._default = default
        self.calls: List[Tuple[str, int]] = []

    def decide(self, word: str, position: int) -> Decision:
        self.calls.append((word, position))
        if self._pending:
            return self._pending.pop(0)
        return self._default
