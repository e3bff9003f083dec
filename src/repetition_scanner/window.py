from __future__ import annotations

import logging
from collections import deque

from .intervals import IntervalSet
from .models import Token, WordWindow
from .source import TextSource

logger = logging.getLogger(__name__)


def next_token(source: TextSource, position: int, ignore: IntervalSet) -> Token | None:
    """
    Return the first eligible token at or after ``position``.

    Tokens are whitespace-delimited and never cross an ignored interval; a
    token without any alphabetic character is skipped. Every iteration moves
    ``pos`` strictly forward, so the loop ends at the end of the source.
    """
    length = len(source)
    pos = max(0, position)
    while pos < length:
        pos = ignore.skip(pos)
        if pos >= length:
            return None
        if source.char_at(pos).isspace():
            pos += 1
            continue
        start = pos
        boundary = ignore.next_left(start)
        stop = length if boundary is None else min(boundary, length)
        while pos < stop and not source.char_at(pos).isspace():
            pos += 1
        text = source.substring(start, pos)
        if any(ch.isalpha() for ch in text):
            return Token(text=text, start_char=start, end_char=pos)
    return None


def first_window(
    source: TextSource, size: int, position: int, ignore: IntervalSet
) -> WordWindow:
    """Collect up to ``size`` tokens starting at ``position``."""
    window = WordWindow(tokens=deque(), origin=position)
    _fill(source, window, size, position, ignore)
    return window


def advance_window(
    source: TextSource, window: WordWindow, size: int, ignore: IntervalSet
) -> WordWindow:
    """
    Slide ``window`` forward by one word in place.

    The leading token is dropped and the window is topped up from its previous
    end, which yields the same tokens as ``first_window`` called one word ahead.
    """
    resume_at = window.end
    if window.tokens:
        dropped = window.tokens.popleft()
        window.origin = dropped.end_char
    while len(window.tokens) > size:
        window.tokens.popleft()
    _fill(source, window, size, resume_at, ignore)
    if not window.tokens:
        window.origin = len(source)
    logger.debug("Window advanced to [%d, %d)", window.start, window.end)
    return window


def advance_position(source: TextSource, position: int, ignore: IntervalSet) -> int:
    """Return the start of the word following the first word at ``position``."""
    first = next_token(source, position, ignore)
    if first is None:
        return len(source)
    following = next_token(source, first.end_char, ignore)
    if following is None:
        return len(source)
    return following.start_char


def _fill(
    source: TextSource,
    window: WordWindow,
    size: int,
    position: int,
    ignore: IntervalSet,
) -> None:
    while len(window.tokens) < size:
        token = next_token(source, position, ignore)
        if token is None:
            break
        window.tokens.append(token)
        position = token.end_char
