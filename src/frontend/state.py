"""State container for the edited document and dirty tracking."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass
class EditorState:
    path: Path
    saved_text: str = ""
    dirty: bool = False
    error: str | None = None
