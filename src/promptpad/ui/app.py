"""Main Textual TUI application.

Orchestrates the composer, status bar and log panel, and feeds UI events into
the composer state machine.
"""

import asyncio
import contextlib

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.message import Message
from textual.widgets import Button, Footer, Header, TextArea

from ..llm import CompletionProvider, PendingCompletion, submit_completion
from .config import ERROR_TOAST_TIMEOUT, LogLevel
from .state import ComposerState, PhaseKind
from .styles import APP_CSS
from .themes import GRUVBOX_DARK
from .widgets import Composer, LogPanel, StatusBar


class CompletionResolved(Message):
    """Posted from the request task's done callback: time to poll again."""


class PromptpadApp(App):
    """Textual TUI for prompt completion."""

    CSS = APP_CSS
    TITLE = "promptpad"

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit", priority=True),
        # The composer binds ctrl+d to delete-right, the log toggle takes precedence
        Binding("ctrl+d", "toggle_log", "Log", priority=True),
        Binding("ctrl+l", "clear_log", "Clear Log", priority=True),
    ]

    def __init__(
        self,
        provider: CompletionProvider,
        log_level: str | None = None,
        text: str = "",
    ) -> None:
        super().__init__()
        self._provider = provider
        self._log_level = log_level
        self.state = ComposerState(text)

    def compose(self) -> ComposeResult:
        yield Header()
        yield Composer(self.state.text, id="composer")
        yield StatusBar(id="status-bar")
        yield LogPanel(id="log-panel")
        yield Footer()

    def on_mount(self) -> None:
        self.register_theme(GRUVBOX_DARK)
        self.theme = GRUVBOX_DARK.name

        if self._log_level is not None:
            log_panel = self.query_one("#log-panel", LogPanel)
            log_panel.log_level = LogLevel.from_string(self._log_level)
            log_panel.show()
            log_panel.info("TUI", f"Log panel enabled with level: {self._log_level.upper()}")

        self._provider.set_debug_callback(self._on_debug)
        self.sub_title = getattr(self._provider, "model", "")
        self.query_one("#composer", Composer).focus()

    def _on_debug(self, level: str, component: str, message: str) -> None:
        """Route provider trace messages to the log panel."""
        log_panel = self.query_one("#log-panel", LogPanel)
        log_panel.write_entry(component, message, LogLevel.from_string(level))

    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        self.state.text = event.text_area.text

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "send-btn":
            self.action_send()

    def on_composer_send_requested(self, event: Composer.SendRequested) -> None:
        event.stop()
        self.action_send()

    def on_completion_resolved(self, event: CompletionResolved) -> None:
        self._tick()

    def action_send(self) -> None:
        """Send the current buffer, superseding any request still in flight."""
        log_panel = self.query_one("#log-panel", LogPanel)
        self.state.text = self.query_one("#composer", Composer).text
        if self.state.pending is not None:
            log_panel.warning("State", "Superseding request still in flight")
        self.state.send(self._submit)
        log_panel.info("State", f"Sending prompt ({len(self.state.text)} chars)")
        self._tick()

    def _submit(self, prompt: str) -> PendingCompletion:
        return submit_completion(
            self._provider,
            prompt,
            on_resolved=lambda: self.post_message(CompletionResolved()),
        )

    def _tick(self) -> None:
        """Evaluate the state machine and render the resulting phase."""
        composer = self.query_one("#composer", Composer)
        log_panel = self.query_one("#log-panel", LogPanel)
        previous = self.state.phase

        # Edits whose Changed event is still queued must not be lost
        self.state.text = composer.text
        selection = self.state.tick()
        if selection is not None:
            composer.append_completion(self.state.text, selection)
            log_panel.info(
                "State",
                f"Appended {selection.length} chars at {selection.start}",
            )

        phase = self.state.phase
        composer.set_class(phase.is_busy, "busy")
        self.query_one("#status-bar", StatusBar).show_phase(phase)

        if phase != previous and phase.kind is PhaseKind.ERROR:
            log_panel.error("State", phase.message or "")
            self.notify(phase.message or "", severity="error", timeout=ERROR_TOAST_TIMEOUT)

    def action_toggle_log(self) -> None:
        """Toggle the log panel visibility."""
        log_panel = self.query_one("#log-panel", LogPanel)
        is_visible = log_panel.toggle()
        self.notify(f"Log panel {'shown' if is_visible else 'hidden'}", timeout=2)

    def action_clear_log(self) -> None:
        self.query_one("#log-panel", LogPanel).clear()
        self.notify("Log cleared", timeout=2)


async def run_textual_tui(
    provider: CompletionProvider,
    log_level: str | None = None,
) -> None:
    """Run the Textual TUI.

    Args:
        provider: Completion provider instance
        log_level: Log level for panel (debug/info/warning/error), None to hide
    """
    app = PromptpadApp(provider=provider, log_level=log_level)
    try:
        await app.run_async()
    except (KeyboardInterrupt, asyncio.CancelledError):
        pass
    finally:
        with contextlib.suppress(RuntimeError):
            await provider.close()
