"""Regex scope matcher.

Implements the core ScopePort by matching document paths against the
configured ``file_pattern``.
"""

from __future__ import annotations

import re


class PatternScopeMatcher:
    """Puts a document in scope when its id (path) matches the pattern."""

    def __init__(self, pattern: str) -> None:
        self._pattern = re.compile(pattern, re.IGNORECASE)

    def is_in_scope(self, document_id: str) -> bool:
        return self._pattern.search(document_id) is not None
