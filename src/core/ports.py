"""Ports (interfaces) used by the core enforcement session.

Ports define the minimal contracts the host editor must provide so that the
core can be reused with different editing surfaces.
"""

from __future__ import annotations

from typing import Protocol


class EditSurfacePort(Protocol):
    """Read access and bounded mutation of the live document."""

    def full_content(self) -> str:
        ...

    def cursor_position(self) -> int:
        """Cursor position as a character offset into ``full_content()``."""
        ...

    def delete_before_cursor(self, count: int) -> None:
        """Delete ``count`` characters ending at the cursor.

        The deletion corrects the edit that was just made and must join that
        edit's undo group: one undo restores the document as it was before
        the edit, never the over-limit text in between.
        """
        ...

    def mark_undo_boundary(self) -> None:
        """Make the next edit start a new undo group."""
        ...


class IndicatorPort(Protocol):
    """Status surface showing the remaining budget."""

    def set_indicator(self, text: str, tier: str) -> None:
        ...


class NotifierPort(Protocol):
    """Transient, non-modal user notifications."""

    def notify(self, message: str) -> None:
        ...


class ScopePort(Protocol):
    """Decides which documents the limit applies to."""

    def is_in_scope(self, document_id: str) -> bool:
        ...
