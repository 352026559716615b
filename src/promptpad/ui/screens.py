"""Modal screens for the TUI.

This module hides the design decisions about:
- Alert dialog appearance (CSS, layout)
- Keyboard shortcuts for dialogs
- How a fatal startup problem is presented before the main window exists

To change how alerts look, modify only this file.
"""

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Static

from .themes import GRUVBOX_DARK


class AlertScreen(ModalScreen[None]):
    """Modal alert with a warning sign, a message and an OK button."""

    CSS = """
    AlertScreen {
        align: center middle;
        background: $background 70%;
    }

    #alert-dialog {
        width: 60;
        height: auto;
        max-height: 20;
        border: tall $accent;
        background: $surface;
        padding: 1 2;
    }

    #alert-body {
        height: auto;
        margin-bottom: 1;
    }

    #alert-icon {
        width: 4;
        color: $accent;
        text-style: bold;
    }

    #alert-message {
        width: 1fr;
        height: auto;
        color: $foreground;
    }

    #alert-buttons {
        width: 100%;
        height: 3;
        align: center middle;
    }

    #alert-buttons Button {
        min-width: 10;
    }
    """

    BINDINGS = [
        Binding("enter", "dismiss_alert", "OK", show=False),
        Binding("escape", "dismiss_alert", "OK", show=False),
    ]

    def __init__(self, message: str) -> None:
        super().__init__()
        self._message = message

    def compose(self) -> ComposeResult:
        with Vertical(id="alert-dialog"):
            with Horizontal(id="alert-body"):
                yield Static("⚠", id="alert-icon")
                yield Static(self._message, id="alert-message", markup=False)
            with Horizontal(id="alert-buttons"):
                yield Button("OK", id="btn-ok", variant="primary")

    def on_mount(self) -> None:
        self.query_one("#btn-ok", Button).focus()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "btn-ok":
            self.dismiss(None)

    def action_dismiss_alert(self) -> None:
        self.dismiss(None)


class AlertApp(App[None]):
    """Standalone app that shows one alert and exits when it is dismissed."""

    TITLE = "Alert"

    def __init__(self, message: str) -> None:
        super().__init__()
        self._message = message

    def on_mount(self) -> None:
        self.register_theme(GRUVBOX_DARK)
        self.theme = GRUVBOX_DARK.name
        self.push_screen(AlertScreen(self._message), lambda _: self.exit())


def show_alert(message: str) -> None:
    """Show a blocking alert dialog."""
    AlertApp(message).run()
