"""Document size counting (core domain)."""

from __future__ import annotations

from typing import Optional

from core.config import CHARACTERS, WORDS


def count_characters(text: str) -> int:
    return len(text)


def count_words(text: str) -> int:
    """Count whitespace-delimited word tokens."""

    return len(text.split())


def count(content: str, mode: str, start: Optional[int] = None, end: Optional[int] = None) -> int:
    """Return the size of ``content[start:end]`` in the units of ``mode``."""

    text = content[start:end]
    if mode == CHARACTERS:
        return count_characters(text)
    if mode == WORDS:
        return count_words(text)
    raise ValueError(f"Unsupported limit type: {mode}")


def trailing_span(content: str, cursor: int, units: int, mode: str) -> int:
    """Return how many characters before ``cursor`` hold the last ``units`` units.

    Words are taken the way a backward word-kill takes them: whitespace right
    before the cursor goes together with the word in front of it. The span is
    clamped at the start of the document.
    """

    cursor = max(0, min(cursor, len(content)))
    if units <= 0:
        return 0
    if mode == CHARACTERS:
        return min(units, cursor)
    if mode != WORDS:
        raise ValueError(f"Unsupported limit type: {mode}")

    position = cursor
    for _ in range(units):
        while position > 0 and content[position - 1].isspace():
            position -= 1
        if position == 0:
            break
        while position > 0 and not content[position - 1].isspace():
            position -= 1
    return cursor - position
