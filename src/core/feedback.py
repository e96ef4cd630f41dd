"""Budget feedback tiers and the indicator controller (core domain)."""

from __future__ import annotations

from typing import Optional

from core.config import LimitConfig
from core.counter import count
from core.models import Feedback
from core.ports import IndicatorPort, ScopePort

NORMAL = "normal"
WARNING = "warning"
CRITICAL = "critical"
TIERS = (NORMAL, WARNING, CRITICAL)


def compute_percent(current: int, maximum: int) -> float:
    """Return the share of the budget used; a non-positive maximum reads as 0%."""

    if maximum <= 0:
        return 0.0
    return 100 * current / maximum


def compute_tier(current: int, maximum: int, warning_threshold: int, critical_threshold: int) -> str:
    """Return the feedback tier; the first matching threshold wins."""

    percent = compute_percent(current, maximum)
    if percent >= critical_threshold:
        return CRITICAL
    if percent >= warning_threshold:
        return WARNING
    return NORMAL


def build_feedback(current: int, config: LimitConfig) -> Feedback:
    maximum = config.maximum
    return Feedback(
        current=current,
        maximum=maximum,
        remaining=maximum - current,
        percent=compute_percent(current, maximum),
        tier=compute_tier(current, maximum, config.warning_threshold, config.critical_threshold),
        text=f"{current}/{maximum} {config.unit_label}",
    )


class FeedbackController:
    """Pushes the current budget to the host's indicator.

    ``last_count`` only tells polling hosts whether a redraw is due; it is
    never consulted for enforcement.
    """

    def __init__(self, document_id: str, indicator: IndicatorPort, scope: ScopePort) -> None:
        self._document_id = document_id
        self._indicator = indicator
        self._scope = scope
        self.last_count: Optional[int] = None

    def refresh(self, config: LimitConfig, content: str) -> Optional[Feedback]:
        if not self._scope.is_in_scope(self._document_id):
            return None

        feedback = build_feedback(count(content, config.limit_type), config)
        self._indicator.set_indicator(feedback.text, feedback.tier)
        self.last_count = feedback.current
        return feedback

    def needs_redraw(self, config: LimitConfig, content: str) -> bool:
        if not self._scope.is_in_scope(self._document_id):
            return False
        return count(content, config.limit_type) != self.last_count
