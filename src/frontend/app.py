"""Main Textual app for the inkcap editor."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal, Vertical
from textual.widgets import Footer, Static

from adapters.text_area_surface import TextAreaSurface
from core.config import LimitConfig
from core.ports import ScopePort
from core.profiles import UnknownProfileError
from core.session import LimitSession

from .constants import INK_BLUE, NOTIFY_TIMEOUT
from .editor import LimitedTextArea
from .indicator import LimitIndicator
from .modals import ProfileScreen, UnsavedChangesScreen
from .state import EditorState

LOGGER = logging.getLogger(__name__)


class EditorApp(App):
    """Single-document editor with a hard size limit and budget indicator."""

    BINDINGS = [
        Binding("ctrl+s", "save", "Save", priority=True),
        Binding("ctrl+t", "toggle_limit_type", "Chars/Words", priority=True),
        Binding("ctrl+o", "select_profile", "Profile", priority=True),
        Binding("ctrl+q", "request_quit", "Quit", priority=True),
    ]

    CSS_PATH = "app.tcss"

    def __init__(
        self,
        path: Path,
        defaults: LimitConfig,
        scope: ScopePort,
        template: str = "",
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self.editor_state = EditorState(path=path)
        self._defaults = defaults
        self._scope = scope
        self._template = template
        self.session: Optional[LimitSession] = None

    def compose(self) -> ComposeResult:
        with Container(id="header"):
            with Horizontal(id="header-row"):
                with Vertical(id="header-left"):
                    yield Static(self._title_text(), id="title")
                    yield Static(str(self.editor_state.path), classes="subtle")
                with Vertical(id="header-right"):
                    yield Static("", id="header-status")
        yield LimitedTextArea(
            self._read_document(),
            id="editor",
            soft_wrap=True,
            tab_behavior="indent",
        )
        yield LimitIndicator("", id="indicator")
        yield Footer()

    def on_mount(self) -> None:
        editor = self.query_one("#editor", LimitedTextArea)
        editor.styles.max_width = self._defaults.fill_column + 2
        self.editor_state.saved_text = editor.text

        self.session = LimitSession(
            document_id=str(self.editor_state.path),
            defaults=self._defaults,
            surface=TextAreaSurface(editor),
            indicator=self.query_one("#indicator", LimitIndicator),
            notifier=self,
            scope=self._scope,
        )
        editor.session = self.session
        self.session.start()
        self._refresh_header()
        editor.focus()

    def notify(self, message: str, **kwargs: Any) -> None:  # type: ignore[override]
        # Limit messages are transient; keep them short-lived unless told otherwise.
        kwargs.setdefault("timeout", NOTIFY_TIMEOUT)
        kwargs.setdefault("markup", False)
        super().notify(message, **kwargs)

    def _read_document(self) -> str:
        path = self.editor_state.path
        if not path.exists():
            return self._template
        try:
            return path.read_text(encoding="utf-8")
        except OSError as exc:
            self.editor_state.error = f"open failed: {exc.strerror or exc}"
            return ""

    def on_text_area_changed(self, event: LimitedTextArea.Changed) -> None:
        if self.session is None:
            return
        self.editor_state.dirty = event.text_area.text != self.editor_state.saved_text
        self.session.handle_content_changed()
        self._refresh_header()

    def action_save(self) -> None:
        self._save_document()

    def action_toggle_limit_type(self) -> None:
        if self.session is None:
            return
        mode = self.session.toggle_limit_type()
        self.notify(f"Limiting by {mode}")

    def action_select_profile(self) -> None:
        if self.session is None:
            return
        self.push_screen(ProfileScreen(dict(self.session.config.profiles)), self._handle_profile_choice)

    def action_request_quit(self) -> None:
        if self.editor_state.dirty:
            self.push_screen(UnsavedChangesScreen(), self._handle_exit_choice)
        else:
            self.exit()

    def _handle_profile_choice(self, name: str | None) -> None:
        if name:
            self._apply_profile(name)

    def _apply_profile(self, name: str) -> None:
        if self.session is None:
            return
        try:
            config = self.session.select_profile(name)
        except UnknownProfileError as exc:
            LOGGER.warning("Unknown profile requested: %s", exc.name)
            self.notify(str(exc), severity="error")
            return
        self.notify(f"Profile {name}: {config.max_chars} chars")

    def _handle_exit_choice(self, choice: str | None) -> None:
        if choice == "save":
            if self._save_document():
                self.exit()
        elif choice == "discard":
            self.exit()
        else:
            return

    def _save_document(self) -> bool:
        editor = self.query_one("#editor", LimitedTextArea)
        path = self.editor_state.path
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(editor.text, encoding="utf-8")
        except OSError as exc:
            self.editor_state.error = f"save failed: {exc.strerror or exc}"
            self._refresh_header()
            return False
        self.editor_state.saved_text = editor.text
        self.editor_state.dirty = False
        self.editor_state.error = None
        self._refresh_header()
        LOGGER.info("Saved %s", path)
        return True

    def _refresh_header(self) -> None:
        status = self.query_one("#header-status", Static)
        status.remove_class("status-saved", "status-modified", "status-error")
        if self.editor_state.error:
            status.update(self.editor_state.error)
            status.add_class("status-error")
        elif self.editor_state.dirty:
            status.update("modified *")
            status.add_class("status-modified")
        else:
            status.update("saved")
            status.add_class("status-saved")

    @staticmethod
    def _title_text() -> Text:
        return Text.assemble(
            ("INK", INK_BLUE),
            ("CAP > Editor", "bold"),
        )
