"""Limit enforcement for edits (core domain).

This module is editor-agnostic. It relies on ports for document access and
notifications, and always measures the live document instead of a cached
count, since the same document can be changed through several paths.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from core.config import LimitConfig
from core.counter import count, trailing_span
from core.models import BulkInsertResult, DocumentSnapshot
from core.ports import EditSurfacePort, NotifierPort, ScopePort

LOGGER = logging.getLogger(__name__)


class LimitEnforcer:
    """Reverts keystrokes and trims pastes that exceed the configured maximum."""

    def __init__(
        self,
        document_id: str,
        surface: EditSurfacePort,
        notifier: NotifierPort,
        scope: ScopePort,
    ) -> None:
        self._document_id = document_id
        self._surface = surface
        self._notifier = notifier
        self._scope = scope

    def _snapshot(self) -> DocumentSnapshot:
        return DocumentSnapshot(
            content=self._surface.full_content(),
            cursor=self._surface.cursor_position(),
        )

    def _delete_before_cursor(self, span: int) -> None:
        # The correction shares the undo group of the edit it corrects; later
        # edits start a new one.
        self._surface.delete_before_cursor(span)
        self._surface.mark_undo_boundary()

    def on_incremental_insert(self, config: LimitConfig, length: int = 1) -> bool:
        """Revert a keystroke of ``length`` characters if it broke the limit.

        The check runs after the insertion happened. A document that is over
        budget for any other reason gets every keystroke reverted until it is
        back within the limit.
        """

        if not self._scope.is_in_scope(self._document_id):
            return False

        snapshot = self._snapshot()
        current = count(snapshot.content, config.limit_type)
        if current <= config.maximum:
            return False

        self._delete_before_cursor(min(length, snapshot.cursor))
        LOGGER.info(
            "Reverted keystroke in %s (%s/%s %s)",
            self._document_id,
            current,
            config.maximum,
            config.unit_label,
        )
        self._notifier.notify(f"Limit reached: {config.maximum} {config.unit_label}")
        return True

    def wrap_bulk_insert(
        self,
        config: LimitConfig,
        perform_insert: Callable[[], object],
    ) -> Optional[BulkInsertResult]:
        """Run a bulk insertion and trim its tail so the document fits.

        Out-of-scope documents get the insertion unmodified and ``None`` back.
        """

        if not self._scope.is_in_scope(self._document_id):
            perform_insert()
            return None

        before = count(self._surface.full_content(), config.limit_type)
        self._surface.mark_undo_boundary()
        perform_insert()
        snapshot = self._snapshot()
        after = count(snapshot.content, config.limit_type)
        inserted = max(0, after - before)

        if after <= config.maximum:
            return BulkInsertResult(inserted=inserted, kept=inserted, trimmed=0)

        excess = after - config.maximum
        span = trailing_span(snapshot.content, snapshot.cursor, excess, config.limit_type)
        if span:
            self._delete_before_cursor(span)

        kept = max(0, inserted - excess)
        LOGGER.info(
            "Trimmed paste in %s: kept %s of %s %s",
            self._document_id,
            kept,
            inserted,
            config.unit_label,
        )
        self._notifier.notify(
            f"Paste trimmed to fit: kept {kept} of {inserted} {config.unit_label}"
        )
        return BulkInsertResult(inserted=inserted, kept=kept, trimmed=inserted - kept)
