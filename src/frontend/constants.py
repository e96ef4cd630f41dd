"""Shared constants for the Textual UI."""

from __future__ import annotations

from core.feedback import CRITICAL, NORMAL, WARNING

INK_BLUE = "#2AABEE"
AMBER = "#FFB000"

# Rich styles for the budget indicator, keyed by feedback tier.
TIER_STYLES = {
    NORMAL: "",
    WARNING: f"bold {AMBER}",
    CRITICAL: "bold red",
}

# Toast lifetime for limit notifications, in seconds.
NOTIFY_TIMEOUT = 3.0
