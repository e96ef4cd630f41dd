"""Budget indicator widget.

Implements the core IndicatorPort as a one-line status bar.
"""

from __future__ import annotations

from rich.text import Text
from textual.widgets import Static

from core.feedback import TIERS

from .constants import TIER_STYLES


class LimitIndicator(Static):
    """Shows ``current/max unit`` styled by feedback tier."""

    def set_indicator(self, text: str, tier: str) -> None:
        self.update(Text(text, style=TIER_STYLES.get(tier, "")))
        self.remove_class(*(f"tier-{name}" for name in TIERS))
        self.add_class(f"tier-{tier}")
