"""Profile selection and limit-type toggling (core domain)."""

from __future__ import annotations

from dataclasses import replace
from typing import List

from core.config import CHARACTERS, WORDS, LimitConfig


class UnknownProfileError(ValueError):
    """Raised when a profile name is not in the profiles mapping."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown profile: {name}")
        self.name = name


def available_profiles(config: LimitConfig) -> List[str]:
    return sorted(config.profiles)


def select_profile(config: LimitConfig, name: str) -> LimitConfig:
    """Return a copy of ``config`` with ``max_chars`` taken from profile ``name``."""

    if name not in config.profiles:
        raise UnknownProfileError(name)
    return replace(config, max_chars=config.profiles[name])


def toggle_limit_type(config: LimitConfig) -> LimitConfig:
    new_type = WORDS if config.limit_type == CHARACTERS else CHARACTERS
    return replace(config, limit_type=new_type)
