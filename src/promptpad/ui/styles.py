"""CSS styles for the TUI.

Hides layout and styling decisions from the application logic.
Uses Textual CSS features: nesting, pseudo-classes, variables.

Layout: the composer fills the screen, the status bar and the optional log
panel sit below it.
"""

APP_CSS = """
/* ============================================
   Main Screen Layout
   ============================================ */
Screen {
    layout: vertical;
    background: $background;
}

/* ============================================
   Composer - Prompt and Completions
   ============================================ */
#composer {
    height: 1fr;
    background: $surface;
    border: round $primary 60%;
    border-title-color: $primary;
    border-title-style: bold;
    border-title-align: left;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    padding: 0 1;
    scrollbar-gutter: stable;

    &:focus {
        border: round $primary;
    }

    /* Request in flight */
    &.busy {
        border: round $warning;
        border-title-color: $warning;
    }
}

/* ============================================
   Status Bar - Send, Spinner, Error
   ============================================ */
#status-bar {
    height: 3;
    background: $panel;
    padding: 0 1;
}

#send-btn {
    width: 10;
    min-width: 8;
    border: tall $success;
    background: $success;
    color: $background;
    text-style: bold;

    &:hover {
        background: $success-lighten-1;
        border: tall $success-lighten-1;
    }
}

#spinner {
    width: 8;
    height: 3;
    background: transparent;
    color: $warning;
}

#error-label {
    width: 1fr;
    height: 3;
    content-align: left middle;
    padding: 0 2;
    color: $error;
    text-style: bold;
}

/* ============================================
   Log Panel
   ============================================ */
#log-panel {
    height: auto;
    min-height: 6;
    max-height: 12;
    background: $panel;
    border: round $secondary 60%;
    border-title-color: $secondary;
    border-title-style: bold;
    border-title-align: left;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    padding: 0 1;
    overflow-y: scroll;
    overflow-x: auto;
    scrollbar-gutter: stable;

    &:focus {
        border: round $secondary;
    }
}
"""
