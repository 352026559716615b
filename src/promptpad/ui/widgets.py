"""Custom Textual widgets for the TUI.

Hides widget implementation details:
- Composer key handling and selection of appended text
- Status bar rendering of the current phase
- Log rendering and level filtering
"""

from collections import deque
from datetime import datetime

from rich.markup import escape
from textual.binding import Binding
from textual.containers import Horizontal
from textual.message import Message
from textual.widgets import Button, LoadingIndicator, RichLog, Static, TextArea
from textual.widgets.text_area import Selection

from .config import (
    LOG_MAX_ENTRIES,
    LOG_MAX_MESSAGE_LENGTH,
    LOG_TIMESTAMP_FORMAT,
    SEND_KEY,
    LogLevel,
)
from .state import SelectionRange, UIPhase, char_offset_to_location


class Composer(TextArea):
    """Multi-line prompt editor that also receives completions."""

    BORDER_TITLE = "Prompt"

    BINDINGS = [
        Binding(SEND_KEY, "send", "Send", priority=True),
    ]

    class SendRequested(Message):
        """Posted when the send key is pressed inside the composer."""

    def __init__(self, *args, **kwargs) -> None:
        kwargs.setdefault("soft_wrap", True)
        kwargs.setdefault("show_line_numbers", False)
        super().__init__(*args, **kwargs)

    def action_send(self) -> None:
        self.post_message(self.SendRequested())

    def append_completion(self, text: str, selection: SelectionRange) -> None:
        """Append generated text, select it and scroll it into view.

        Args:
            text: Full buffer after the append
            selection: Range of the appended characters within text
        """
        start = char_offset_to_location(text, selection.start)
        result = self.insert(text[selection.start : selection.end], location=start)
        self.selection = Selection(start, result.end_location)
        self.scroll_cursor_visible()
        self.focus()


class StatusBar(Horizontal):
    """Send button, busy spinner and error banner."""

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._error_text = ""

    def compose(self):
        yield Button("Send", id="send-btn", variant="success").with_tooltip(
            "Send prompt (Ctrl+J)"
        )
        yield LoadingIndicator(id="spinner")
        yield Static("", id="error-label", markup=False)

    def on_mount(self) -> None:
        self.show_phase(UIPhase.idle())

    def show_phase(self, phase: UIPhase) -> None:
        """Render a UI phase: spinner while busy, message on error."""
        self.query_one("#spinner", LoadingIndicator).display = phase.is_busy
        self._error_text = phase.message if phase.is_error else ""
        self.query_one("#error-label", Static).update(self._error_text)

    @property
    def error_text(self) -> str:
        return self._error_text


class LogPanel(RichLog):
    """Log panel for request tracing with level filtering.

    Shows timestamped log messages from all components.
    Supports standard log levels: DEBUG < INFO < WARNING < ERROR.
    Hidden by default, shown with --log-level flag or toggled with Ctrl+D.
    """

    BORDER_TITLE = "Log"
    BORDER_SUBTITLE = "Trace log"

    def __init__(self, *args, log_level: int = LogLevel.DEBUG, **kwargs) -> None:
        super().__init__(
            *args,
            markup=True,
            highlight=False,
            auto_scroll=True,
            wrap=False,
            max_lines=LOG_MAX_ENTRIES,
            **kwargs
        )
        self._log_level = log_level
        self.entries: deque[str] = deque(maxlen=LOG_MAX_ENTRIES)
        # Hidden until --log-level or Ctrl+D
        self.display = False

    @property
    def log_level(self) -> int:
        """Current log level threshold."""
        return self._log_level

    @log_level.setter
    def log_level(self, level: int) -> None:
        self._log_level = level
        self._update_subtitle()

    def _update_subtitle(self) -> None:
        if self.display:
            self.border_subtitle = f"Level: {LogLevel.name(self._log_level)}"
        else:
            self.border_subtitle = "Hidden"

    def write_entry(
        self,
        component: str,
        message: str,
        level: int = LogLevel.DEBUG
    ) -> None:
        """Add a log entry if it meets the current level threshold.

        Args:
            component: Component name (TUI, LLM, State)
            message: Log message
            level: Log level (LogLevel.DEBUG, INFO, WARNING, ERROR)
        """
        if level < self._log_level:
            return

        if len(message) > LOG_MAX_MESSAGE_LENGTH:
            message = message[:LOG_MAX_MESSAGE_LENGTH] + "..."

        timestamp = datetime.now().strftime(LOG_TIMESTAMP_FORMAT)
        level_colors = {
            LogLevel.DEBUG: "dim white",
            LogLevel.INFO: "cyan",
            LogLevel.WARNING: "yellow",
            LogLevel.ERROR: "red",
        }
        component_colors = {
            "TUI": "cyan",
            "LLM": "magenta",
            "State": "green",
        }
        level_color = level_colors.get(level, "white")
        comp_color = component_colors.get(component, "white")
        level_name = LogLevel.name(level)

        self.entries.append(f"{level_name} [{component}] {message}")
        self.write(
            f"[dim]{timestamp}[/] "
            f"[{level_color}]{level_name:<5}[/] "
            f"[{comp_color}]{escape(f'[{component}]')}[/] {escape(message)}"
        )

    def info(self, component: str, message: str) -> None:
        self.write_entry(component, message, LogLevel.INFO)

    def warning(self, component: str, message: str) -> None:
        self.write_entry(component, message, LogLevel.WARNING)

    def error(self, component: str, message: str) -> None:
        self.write_entry(component, message, LogLevel.ERROR)

    def clear(self) -> "LogPanel":
        self.entries.clear()
        return super().clear()

    def show(self) -> None:
        self.display = True
        self._update_subtitle()

    def hide(self) -> None:
        self.display = False
        self.border_subtitle = "Hidden"

    def toggle(self) -> bool:
        """Toggle visibility. Returns new state."""
        if self.display:
            self.hide()
            return False
        self.show()
        return True
