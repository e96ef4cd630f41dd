"""Static configuration for inkcap.

All user-editable settings (limits, profiles, template, logging) live in a
single JSON file for quick edits without touching Python.
"""

import json
import os

from dotenv import load_dotenv

from core.config import DEFAULT_PROFILES, LimitConfig

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))

load_dotenv()

# INKCAP_CONFIG points at an alternative config file, e.g. from a .env file.
CONFIG_PATH = os.getenv("INKCAP_CONFIG") or os.path.join(PROJECT_ROOT, "config.json")


def _load_json_config(path: str) -> dict:
    """Load config.json; a missing file means built-in defaults."""

    if not os.path.exists(path):
        return {}

    with open(path, "r", encoding="utf-8") as handle:
        loaded = json.load(handle)
    if not isinstance(loaded, dict):
        raise ValueError(f"Config root must be an object: {path}")
    return loaded


def _normalize_profiles(raw_profiles: dict) -> dict[str, int]:
    """Normalize profile entries, skipping disabled ones.

    A profile is either a plain integer or ``{"max_chars": N, "enabled": bool}``.
    """

    profiles: dict[str, int] = {}
    for name, entry in raw_profiles.items():
        if isinstance(entry, dict):
            if not entry.get("enabled", True):
                continue
            entry = entry.get("max_chars")
        if entry is None:
            continue
        profiles[str(name)] = int(entry)
    return profiles


def build_limit_config(raw_limits: dict) -> LimitConfig:
    """Build the default LimitConfig from the ``limits`` config section."""

    defaults = LimitConfig()
    raw_profiles = raw_limits.get("profiles")
    profiles = dict(DEFAULT_PROFILES) if raw_profiles is None else _normalize_profiles(raw_profiles)
    return LimitConfig(
        limit_type=raw_limits.get("limit_type", defaults.limit_type),
        max_chars=int(raw_limits.get("max_chars", defaults.max_chars)),
        max_words=int(raw_limits.get("max_words", defaults.max_words)),
        warning_threshold=int(raw_limits.get("warning_threshold", defaults.warning_threshold)),
        critical_threshold=int(raw_limits.get("critical_threshold", defaults.critical_threshold)),
        fill_column=int(raw_limits.get("fill_column", defaults.fill_column)),
        profiles=profiles,
        file_pattern=raw_limits.get("file_pattern", defaults.file_pattern),
    )


_CONFIG = _load_json_config(CONFIG_PATH)

# Expose the raw config for modules that need structured access.
CONFIG = _CONFIG

# Global defaults; each open document copies these into its own session.
LIMITS = build_limit_config(_CONFIG.get("limits", {}))

# Text inserted into documents that do not exist yet.
TEMPLATE = str(_CONFIG.get("template", ""))

# Logging configuration (optional).
LOGGING = _CONFIG.get("logging", {})
