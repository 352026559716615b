"""UI configuration constants.

Centralizes key bindings, messages and other fixed values for the UI module.
"""


class LogLevel:
    """Log level constants with numeric values for comparison.

    Standard logging hierarchy: DEBUG < INFO < WARNING < ERROR
    Lower numeric value = more verbose (shows more messages).
    """

    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40

    _names = {
        DEBUG: "DEBUG",
        INFO: "INFO",
        WARNING: "WARNING",
        ERROR: "ERROR",
    }

    _from_string = {
        "debug": DEBUG,
        "info": INFO,
        "warning": WARNING,
        "error": ERROR,
    }

    @classmethod
    def name(cls, level: int) -> str:
        """Get the name for a log level."""
        return cls._names.get(level, "UNKNOWN")

    @classmethod
    def from_string(cls, level_str: str) -> int:
        """Convert string to log level. Returns DEBUG if invalid."""
        return cls._from_string.get(level_str.lower(), cls.DEBUG)


# Key that sends the prompt while the composer has focus.
# Terminals do not report ctrl+enter, ctrl+j is the nearest they deliver.
SEND_KEY = "ctrl+j"

# Credential file looked up in the working directory
DEFAULT_TOKEN_FILE = "openai.token"

TOKEN_MISSING_MESSAGE = (
    "OpenAI token was not found.\n"
    "Please add it to a file named `{path}` in the current directory.\n\n"
    "This app will now exit."
)

# Log panel configuration
LOG_TIMESTAMP_FORMAT = "%H:%M:%S"
LOG_MAX_MESSAGE_LENGTH = 500  # Characters before truncating log messages
LOG_MAX_ENTRIES = 1000  # Lines kept in the log panel

# Seconds an error toast stays on screen
ERROR_TOAST_TIMEOUT = 5
