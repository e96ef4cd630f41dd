"""Modal dialogs for the Textual editor."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Container, Horizontal
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Static


class UnsavedChangesScreen(ModalScreen[str]):
    """Prompt when exiting with unsaved changes."""

    def compose(self) -> ComposeResult:
        yield Container(
            Static("Unsaved changes", classes="modal-title"),
            Static("Save changes before exit?", classes="modal-body"),
            Horizontal(
                Button("Save", id="unsaved-save", variant="success"),
                Button("Discard", id="unsaved-discard", variant="error"),
                Button("Cancel", id="unsaved-cancel"),
                classes="modal-actions",
            ),
            classes="modal-dialog modal-dialog--confirm",
        )

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "unsaved-save":
            self.dismiss("save")
        elif event.button.id == "unsaved-discard":
            self.dismiss("discard")
        else:
            self.dismiss("cancel")


class ProfileScreen(ModalScreen[str | None]):
    """Ask for a profile name; validation happens in the session."""

    def __init__(self, profiles: dict[str, int]) -> None:
        super().__init__()
        self._profiles = profiles

    def compose(self) -> ComposeResult:
        available = ", ".join(f"{name} ({limit})" for name, limit in sorted(self._profiles.items()))
        yield Container(
            Static("Select profile", classes="modal-title"),
            Static(available or "No profiles configured", classes="modal-body"),
            Static("profile", classes="form-label"),
            Input(placeholder="micro", id="profile-name"),
            Horizontal(
                Button("Apply", id="profile-apply", variant="success"),
                Button("Cancel", id="profile-cancel"),
                classes="modal-actions",
            ),
            classes="modal-dialog modal-dialog--form",
        )

    def on_input_submitted(self, event: Input.Submitted) -> None:
        self._apply(event.value)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "profile-apply":
            self._apply(self.query_one("#profile-name", Input).value)
        else:
            self.dismiss(None)

    def _apply(self, value: str) -> None:
        name = value.strip()
        self.dismiss(name or None)
