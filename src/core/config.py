"""Core configuration dataclasses.

Config parsing lives in ``settings``; this module only defines the shape the
core expects, plus the built-in defaults used when no config file is present.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping

CHARACTERS = "characters"
WORDS = "words"
LIMIT_TYPES = (CHARACTERS, WORDS)

UNIT_LABELS = {
    CHARACTERS: "chars",
    WORDS: "words",
}

DEFAULT_PROFILES: dict[str, int] = {
    "sms": 160,
    "tweet": 280,
    "micro": 500,
    "flash": 1000,
    "abstract": 1500,
}


@dataclass(frozen=True)
class LimitConfig:
    """Limit settings for one document.

    Instances are immutable: profile and mode commands build a new instance
    for the session that issued them, so other documents keep their own.
    """

    limit_type: str = CHARACTERS
    max_chars: int = 2000
    max_words: int = 300
    warning_threshold: int = 80
    critical_threshold: int = 95
    fill_column: int = 70
    profiles: Mapping[str, int] = field(default_factory=lambda: dict(DEFAULT_PROFILES))
    file_pattern: str = r"\.(txt|md)$"

    def __post_init__(self) -> None:
        if self.limit_type not in LIMIT_TYPES:
            raise ValueError(f"Unsupported limit type: {self.limit_type}")
        for name in ("warning_threshold", "critical_threshold"):
            value = getattr(self, name)
            if not 0 < value <= 100:
                raise ValueError(f"{name} must be in (0, 100], got {value}")
        if self.warning_threshold >= self.critical_threshold:
            raise ValueError(
                "warning_threshold must be lower than critical_threshold "
                f"({self.warning_threshold} >= {self.critical_threshold})"
            )
        for name in ("max_chars", "max_words", "fill_column"):
            value = getattr(self, name)
            if value <= 0:
                raise ValueError(f"{name} must be positive, got {value}")
        for name, size in self.profiles.items():
            if size <= 0:
                raise ValueError(f"Profile {name!r} must have a positive size, got {size}")

    @property
    def maximum(self) -> int:
        """Maximum size for the active limit type."""

        if self.limit_type == WORDS:
            return self.max_words
        return self.max_chars

    @property
    def unit_label(self) -> str:
        return UNIT_LABELS[self.limit_type]
