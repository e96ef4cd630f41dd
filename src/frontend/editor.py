"""TextArea subclass that feeds edit events to a limit session.

Typed input (printable keys, Enter, indenting Tab) takes the incremental
path; terminal paste events and the paste action take the bulk path. All
other keys fall through to the stock TextArea handling.
"""

from __future__ import annotations

from typing import Optional

from textual import events
from textual.widgets import TextArea

from core.session import LimitSession


class LimitedTextArea(TextArea):
    """Text area whose insertions are checked against a LimitSession."""

    session: Optional[LimitSession] = None

    def _typed_text(self, event: events.Key) -> Optional[str]:
        if event.key == "enter":
            return "\n"
        if event.key == "tab":
            if self.tab_behavior != "indent":
                return None
            return "\t" if self.indent_type == "tabs" else " " * self.indent_width
        if event.is_printable:
            return event.character
        return None

    async def _on_key(self, event: events.Key) -> None:
        if self.read_only or self.session is None:
            return
        insert = self._typed_text(event)
        if not insert:
            return

        # Insert here instead of in TextArea's handler so the check runs after it.
        event.stop()
        event.prevent_default()
        self.replace(insert, *self.selection, maintain_selection_offset=False)
        self.session.handle_incremental_insert(len(insert))

    async def _on_paste(self, event: events.Paste) -> None:
        if self.read_only or self.session is None:
            return
        event.stop()
        event.prevent_default()
        self.paste_text(event.text)

    def action_paste(self) -> None:
        if self.read_only:
            return
        clipboard = self.app.clipboard
        if clipboard:
            self.paste_text(clipboard)

    def paste_text(self, text: str) -> None:
        """Insert ``text`` as one flow, replacing the selection."""

        def perform_insert() -> None:
            self.replace(text, *self.selection, maintain_selection_offset=False)

        if self.session is None:
            perform_insert()
            return
        self.session.handle_bulk_insert(perform_insert)
