"""Per-document enforcement session.

The session is the composition root for one open document: it owns that
document's configuration copy, wires the enforcer and the feedback controller
to the host ports, and exposes the user-facing commands.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Callable, Optional

from core import profiles
from core.config import LimitConfig
from core.enforcer import LimitEnforcer
from core.feedback import FeedbackController
from core.models import BulkInsertResult, Feedback
from core.ports import EditSurfacePort, IndicatorPort, NotifierPort, ScopePort

LOGGER = logging.getLogger(__name__)


class LimitSession:
    """Limit enforcement and feedback for a single open document."""

    def __init__(
        self,
        document_id: str,
        defaults: LimitConfig,
        surface: EditSurfacePort,
        indicator: IndicatorPort,
        notifier: NotifierPort,
        scope: ScopePort,
    ) -> None:
        self.document_id = document_id
        # Commands replace this copy only; the defaults stay shared.
        self.config = replace(defaults)
        self._surface = surface
        self._enforcer = LimitEnforcer(document_id, surface, notifier, scope)
        self._feedback = FeedbackController(document_id, indicator, scope)

    @property
    def last_count(self) -> Optional[int]:
        return self._feedback.last_count

    def start(self) -> Optional[Feedback]:
        LOGGER.info(
            "Limit session started for %s (%s %s)",
            self.document_id,
            self.config.maximum,
            self.config.unit_label,
        )
        return self.refresh()

    def refresh(self) -> Optional[Feedback]:
        return self._feedback.refresh(self.config, self._surface.full_content())

    def handle_incremental_insert(self, length: int = 1) -> bool:
        return self._enforcer.on_incremental_insert(self.config, length)

    def handle_bulk_insert(self, perform_insert: Callable[[], object]) -> Optional[BulkInsertResult]:
        return self._enforcer.wrap_bulk_insert(self.config, perform_insert)

    def handle_content_changed(self) -> Optional[Feedback]:
        return self.refresh()

    def select_profile(self, name: str) -> LimitConfig:
        """Apply profile ``name``; raises ``UnknownProfileError`` and keeps the config otherwise."""

        self.config = profiles.select_profile(self.config, name)
        LOGGER.info("Profile %s selected for %s (%s chars)", name, self.document_id, self.config.max_chars)
        self.refresh()
        return self.config

    def toggle_limit_type(self) -> str:
        self.config = profiles.toggle_limit_type(self.config)
        LOGGER.info("Limit type for %s is now %s", self.document_id, self.config.limit_type)
        self.refresh()
        return self.config.limit_type
