"""Textual TextArea adapter.

Implements the core EditSurfacePort on top of a Textual ``TextArea``. The
core speaks in character offsets while Textual addresses text by
``(row, column)`` locations, so this module converts between the two.

Offsets always count a line break as one character, whatever newline style
the document was loaded with, so a CRLF file is measured the same way as
the text the author sees.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence, Tuple

from textual.widgets import TextArea
from textual.widgets.text_area import Edit, EditHistory

Location = Tuple[int, int]


def location_to_offset(lines: Sequence[str], location: Location, newline_length: int = 1) -> int:
    """Return the character offset of ``location`` in the joined document."""

    row, column = location
    offset = sum(len(line) + newline_length for line in lines[:row])
    return offset + column


def offset_to_location(lines: Sequence[str], offset: int, newline_length: int = 1) -> Location:
    """Return the ``(row, column)`` location of a character offset.

    Offsets past the end clamp to the end of the last line; negative offsets
    clamp to the start of the document.
    """

    remaining = max(0, offset)
    for row, line in enumerate(lines):
        if remaining <= len(line):
            return row, remaining
        remaining -= len(line) + newline_length
        # An offset inside a multi-character newline lands at the line end.
        if remaining < 0:
            return row, len(line)
    if not lines:
        return 0, 0
    return len(lines) - 1, len(lines[-1])


@dataclass
class CorrectableEditHistory(EditHistory):
    """Edit history that can fold a correction into the latest undo group.

    Textual always opens a new group when a deletion follows an insertion,
    which would let a single undo bring back text the limit just removed.
    """

    _join_next: bool = field(init=False, default=False)

    @classmethod
    def like(cls, history: EditHistory) -> "CorrectableEditHistory":
        return cls(
            max_checkpoints=history.max_checkpoints,
            checkpoint_timer=history.checkpoint_timer,
            checkpoint_max_characters=history.checkpoint_max_characters,
        )

    def join_next_edit(self) -> None:
        """Record the next edit into the current group instead of a new one."""

        self._join_next = True

    def record(self, edit: Edit) -> None:
        batches = self.undo_stack
        if not self._join_next or not batches:
            self._join_next = False
            super().record(edit)
            return

        self._join_next = False
        # undo_stack copies the stack but shares the groups themselves.
        batches[-1].append(edit)
        self.checkpoint()

    def clear(self) -> None:
        super().clear()
        self._join_next = False


class TextAreaSurface:
    """Edit surface backed by a Textual TextArea widget.

    A plain ``TextArea`` gets a :class:`CorrectableEditHistory` installed on
    attach; history recorded before that point is dropped.
    """

    def __init__(self, text_area: TextArea) -> None:
        if not isinstance(text_area.history, CorrectableEditHistory):
            text_area.history = CorrectableEditHistory.like(text_area.history)
        self._text_area = text_area
        self._history = text_area.history

    def _lines(self) -> Sequence[str]:
        return self._text_area.document.lines

    def full_content(self) -> str:
        return "\n".join(self._lines())

    def cursor_position(self) -> int:
        return location_to_offset(self._lines(), self._text_area.cursor_location)

    def delete_before_cursor(self, count: int) -> None:
        if count <= 0:
            return
        end = self.cursor_position()
        start = max(0, end - count)
        if start == end:
            return
        lines = self._lines()
        self._history.join_next_edit()
        self._text_area.delete(
            offset_to_location(lines, start),
            offset_to_location(lines, end),
            maintain_selection_offset=False,
        )

    def mark_undo_boundary(self) -> None:
        self._history.checkpoint()
