"""Theme definitions for the TUI.

This module hides the design decisions about:
- Color palette and visual appearance
- Theme variables (borders, selection, scrollbars)

To add a new theme, define it here and register it in the app.
"""

from textual.theme import Theme

# Warm low-contrast dark theme; the selection color doubles as the
# highlight for freshly generated text, so it is kept clearly visible.
GRUVBOX_DARK = Theme(
    name="promptpad-gruvbox",
    primary="#83a598",      # Aqua-blue - focus and borders
    secondary="#d3869b",    # Purple - log panel
    accent="#fabd2f",       # Yellow - alert dialog
    foreground="#ebdbb2",   # Light text
    background="#1d2021",   # Hard background
    success="#b8bb26",      # Green - send button
    warning="#fe8019",      # Orange - warnings
    error="#fb4934",        # Red - error banner
    surface="#282828",      # Editor surface
    panel="#32302f",        # Bars and panels
    dark=True,
    variables={
        "border": "#504945",
        "border-blurred": "#3c3836",

        # Editor cursor and selection
        "block-cursor-foreground": "#1d2021",
        "block-cursor-background": "#ebdbb2",
        "block-cursor-blurred-background": "#504945",
        "input-selection-background": "#fabd2f 35%",

        "scrollbar": "#3c3836",
        "scrollbar-hover": "#504945",
        "scrollbar-active": "#83a598",
        "scrollbar-background": "#282828",

        "footer-background": "#1d2021",
        "footer-key-foreground": "#fabd2f",

        "text-muted": "#928374",
        "text-error": "#fb4934",
    },
)
