"""Terminal UI module for promptpad.

Provides a Textual-based TUI for prompt completion.

Module structure (Parnas principle - each module hides a design decision):
- state.py: Composer state machine (prompt buffer, pending request, phase)
- widgets.py: Custom widgets (composer, status bar, log panel)
- styles.py: CSS styling (layout decisions)
- themes.py: Color palette and theme configuration
- screens.py: Modal dialogs (startup alert)
- app.py: Application orchestration (user interaction flow)
"""

from .app import CompletionResolved, PromptpadApp, run_textual_tui
from .config import LogLevel
from .screens import AlertApp, AlertScreen, show_alert
from .state import ComposerState, PhaseKind, SelectionRange, UIPhase, char_offset_to_location
from .widgets import Composer, LogPanel, StatusBar

__all__ = [
    "AlertApp",
    "AlertScreen",
    "CompletionResolved",
    "Composer",
    "ComposerState",
    "LogLevel",
    "LogPanel",
    "PhaseKind",
    "PromptpadApp",
    "SelectionRange",
    "StatusBar",
    "UIPhase",
    "char_offset_to_location",
    "run_textual_tui",
    "show_alert",
]
