"""Core domain models.

These dataclasses are shared across the core and adapters to avoid tight
coupling to any editor-specific types.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DocumentSnapshot:
    """Document content and cursor offset at the moment of an edit event."""

    content: str
    cursor: int


@dataclass(frozen=True)
class Feedback:
    """Rendered budget feedback for the status surface."""

    current: int
    maximum: int
    remaining: int
    percent: float
    tier: str
    text: str


@dataclass(frozen=True)
class BulkInsertResult:
    """Outcome of a wrapped bulk insertion, measured in limit units."""

    inserted: int
    kept: int
    trimmed: int
