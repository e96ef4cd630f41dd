"""Statistics trailer formatting for exported documents.

Keeping the trailer format here lets the CLI ``stats`` and ``export``
commands agree on the numbers they report.
"""

from __future__ import annotations

from core.config import CHARACTERS, WORDS, LimitConfig
from core.counter import count
from core.feedback import compute_percent

DIVIDER = "──────────────"


def build_statistics(content: str, config: LimitConfig) -> dict:
    """Return character/word counts, limits, and budget usage for ``content``."""

    characters = count(content, CHARACTERS)
    words = count(content, WORDS)
    current = characters if config.limit_type == CHARACTERS else words
    return {
        "characters": characters,
        "words": words,
        "limit_type": config.limit_type,
        "max_chars": config.max_chars,
        "max_words": config.max_words,
        "remaining": config.maximum - current,
        "percent": round(compute_percent(current, config.maximum), 1),
    }


def format_statistics_trailer(content: str, config: LimitConfig) -> str:
    stats = build_statistics(content, config)
    lines = [
        DIVIDER,
        f"Characters: {stats['characters']}/{stats['max_chars']}",
        f"Words:      {stats['words']}/{stats['max_words']}",
        f"Budget:     {stats['percent']}% of {stats['limit_type']} limit used, "
        f"{stats['remaining']} remaining",
    ]
    return "\n".join(lines)


def export_with_trailer(content: str, config: LimitConfig) -> str:
    """Return ``content`` followed by a blank line and the statistics trailer."""

    return f"{content.rstrip()}\n\n{format_statistics_trailer(content, config)}\n"
