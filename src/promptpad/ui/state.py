"""Composer state machine.

Hides how presentation is derived from the pending request: the prompt
buffer, the single pending-request slot and the current phase live here, free
of any widget, so the transitions can be driven and checked without a
terminal.
"""

import re
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from ..llm import CompletionApiError, PendingCompletion

# Every boundary str.splitlines() recognises, which is how the editor splits lines
_LINE_BREAK = re.compile(r"\r\n|[\n\r\v\f\x1c\x1d\x1e\x85\u2028\u2029]")


class PhaseKind(str, Enum):
    IDLE = "idle"
    BUSY = "busy"
    ERROR = "error"


@dataclass(frozen=True)
class UIPhase:
    """Current presentation phase. Only ERROR carries a message."""

    kind: PhaseKind
    message: str | None = None

    @classmethod
    def idle(cls) -> "UIPhase":
        return cls(PhaseKind.IDLE)

    @classmethod
    def busy(cls) -> "UIPhase":
        return cls(PhaseKind.BUSY)

    @classmethod
    def error(cls, message: str) -> "UIPhase":
        return cls(PhaseKind.ERROR, message)

    @property
    def is_busy(self) -> bool:
        return self.kind is PhaseKind.BUSY

    @property
    def is_error(self) -> bool:
        return self.kind is PhaseKind.ERROR


@dataclass(frozen=True)
class SelectionRange:
    """Character range of freshly appended text."""

    start: int
    length: int

    @property
    def end(self) -> int:
        return self.start + self.length


def normalize_newlines(text: str) -> str:
    """Replace every line break with "\\n", the editor's own separator."""
    return _LINE_BREAK.sub("\n", text)


def char_offset_to_location(text: str, offset: int) -> tuple[int, int]:
    """Convert a character offset into a (row, column) editor location."""
    offset = max(0, min(offset, len(text)))
    row = text.count("\n", 0, offset)
    column = offset - (text.rfind("\n", 0, offset) + 1)
    return row, column


class ComposerState:
    """Prompt buffer plus the single pending request and its phase.

    Usage:
        state = ComposerState("Once upon a")
        state.send(lambda prompt: submit_completion(provider, prompt))
        # ... later, whenever the UI is told the request resolved:
        selection = state.tick()
    """

    def __init__(self, text: str = "") -> None:
        self.text = text
        self.phase = UIPhase.idle()
        self.pending: PendingCompletion | None = None

    def send(self, submit: Callable[[str], PendingCompletion]) -> PendingCompletion:
        """Start a request for the current buffer.

        An earlier request that is still running is superseded: its handle is
        dropped and its result will never be applied.
        """
        self.pending = submit(self.text)
        self.phase = UIPhase.busy()
        return self.pending

    def tick(self) -> SelectionRange | None:
        """Advance the phase from the pending request.

        Returns:
            Range of the appended completion, or None if nothing was appended
        """
        if self.pending is None:
            return None

        outcome = self.pending.poll()
        if outcome is None:
            self.phase = UIPhase.busy()
            return None

        self.pending = None

        if outcome.error is not None:
            self.phase = UIPhase.error(outcome.error.message)
            return None

        result = outcome.result
        if isinstance(result, CompletionApiError):
            self.phase = UIPhase.error(result.summary)
            return None

        # Length is taken at delivery time so edits made while busy are kept
        appended = normalize_newlines(result.text)
        selection = SelectionRange(start=len(self.text), length=len(appended))
        self.text += appended
        self.phase = UIPhase.idle()
        return selection
