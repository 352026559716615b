"""Unit tests for the composer state machine."""
import pytest
from hypothesis import given
from hypothesis import strategies as st

from promptpad.llm import (
    ApiErrorObject,
    Choice,
    CompletionApiError,
    CompletionOutcome,
    CompletionSuccess,
    ResponseDecodeError,
    TransportError,
)
from promptpad.ui.state import (
    ComposerState,
    PhaseKind,
    SelectionRange,
    UIPhase,
    char_offset_to_location,
    normalize_newlines,
)


class StubHandle:
    """Pending request whose outcome the test controls."""

    def __init__(self, outcome: CompletionOutcome | None = None) -> None:
        self.outcome = outcome
        self.polls = 0

    def poll(self) -> CompletionOutcome | None:
        self.polls += 1
        return self.outcome


def success(text: str) -> CompletionOutcome:
    return CompletionOutcome(result=CompletionSuccess(choices=[Choice(text=text, index=0)]))


def sender(handle: StubHandle, prompts: list[str] | None = None):
    def _submit(prompt: str) -> StubHandle:
        if prompts is not None:
            prompts.append(prompt)
        return handle
    return _submit


class TestUIPhase:

    def test_constructors(self):
        assert UIPhase.idle().kind is PhaseKind.IDLE
        assert UIPhase.busy().is_busy
        error = UIPhase.error("ERROR: boom")
        assert error.is_error
        assert error.message == "ERROR: boom"

    def test_phases_compare_by_value(self):
        assert UIPhase.error("x") == UIPhase.error("x")
        assert UIPhase.error("x") != UIPhase.error("y")


class TestComposerState:

    def test_initial_state(self):
        state = ComposerState()

        assert state.text == ""
        assert state.phase == UIPhase.idle()
        assert state.pending is None
        assert state.tick() is None
        assert state.phase == UIPhase.idle()

    def test_send_submits_buffer_and_goes_busy(self):
        prompts: list[str] = []
        handle = StubHandle()
        state = ComposerState("Once upon a")

        returned = state.send(sender(handle, prompts))

        assert returned is handle
        assert prompts == ["Once upon a"]
        assert state.pending is handle
        assert state.phase.is_busy

    def test_not_ready_stays_busy_without_side_effects(self):
        handle = StubHandle()
        state = ComposerState("Once upon a")
        state.send(sender(handle))

        for _ in range(3):
            assert state.tick() is None
            assert state.phase.is_busy
            assert state.pending is handle
            assert state.text == "Once upon a"
        assert handle.polls == 3

    def test_success_appends_and_selects(self):
        handle = StubHandle()
        state = ComposerState("Once upon a")
        state.send(sender(handle))

        handle.outcome = success(" time")
        selection = state.tick()

        assert state.text == "Once upon a time"
        assert selection == SelectionRange(start=11, length=5)
        assert selection.end == 16
        assert state.phase == UIPhase.idle()
        assert state.pending is None

    def test_edits_while_busy_are_kept(self):
        handle = StubHandle()
        state = ComposerState("Once upon a")
        state.send(sender(handle))

        state.text = "Once upon a midnight"
        handle.outcome = success(" dreary")
        selection = state.tick()

        assert state.text == "Once upon a midnight dreary"
        assert selection == SelectionRange(start=20, length=7)

    def test_api_error_shows_type(self):
        handle = StubHandle()
        state = ComposerState("hello")
        state.send(sender(handle))

        error = ApiErrorObject(message="The model `nope` does not exist", type="invalid_request_error")
        handle.outcome = CompletionOutcome(result=CompletionApiError(error=error))
        assert state.tick() is None

        assert state.phase == UIPhase.error("ERROR: invalid_request_error")
        assert state.text == "hello"
        assert state.pending is None

    @pytest.mark.parametrize(
        "error",
        [
            TransportError("connection refused"),
            ResponseDecodeError("ERROR: expected value at line 1 column 1"),
        ],
    )
    def test_failure_shows_message(self, error):
        handle = StubHandle()
        state = ComposerState("hello")
        state.send(sender(handle))

        handle.outcome = CompletionOutcome(error=error)
        assert state.tick() is None

        assert state.phase == UIPhase.error(error.message)
        assert state.text == "hello"
        assert state.pending is None

    def test_error_cleared_by_next_send(self):
        state = ComposerState("hello")
        state.send(sender(StubHandle(CompletionOutcome(error=TransportError("down")))))
        state.tick()
        assert state.phase.is_error

        state.send(sender(StubHandle()))

        assert state.phase.is_busy

    def test_superseded_result_is_never_applied(self):
        first = StubHandle()
        second = StubHandle()
        state = ComposerState("Once upon a")
        state.send(sender(first))
        state.send(sender(second))

        first.outcome = success(" OLD")
        assert state.tick() is None
        assert state.text == "Once upon a"
        assert state.phase.is_busy
        assert first.polls == 0

        second.outcome = success(" time")
        state.tick()
        assert state.text == "Once upon a time"
        assert state.tick() is None
        assert state.text == "Once upon a time"

    @given(st.text(), st.text())
    def test_append_property(self, prompt: str, completion: str):
        """Property test: buffer becomes P + T and selection covers T."""
        state = ComposerState(prompt)
        state.send(sender(StubHandle(success(completion))))

        selection = state.tick()

        appended = normalize_newlines(completion)
        assert state.text == prompt + appended
        assert selection == SelectionRange(start=len(prompt), length=len(appended))
        assert state.text[selection.start:selection.end] == appended

    @pytest.mark.parametrize(
        "completion, appended",
        [
            (" time\r\nThe end", " time\nThe end"),
            (" time\u2028more", " time\nmore"),
            (" a\rb", " a\nb"),
        ],
    )
    def test_completion_line_breaks_become_newlines(self, completion, appended):
        state = ComposerState("Once upon a")
        state.send(sender(StubHandle(success(completion))))

        selection = state.tick()

        assert state.text == "Once upon a" + appended
        assert selection == SelectionRange(start=11, length=len(appended))


class TestNormalizeNewlines:

    def test_plain_newlines_unchanged(self):
        assert normalize_newlines("a\nb\n") == "a\nb\n"

    def test_crlf_is_one_newline(self):
        assert normalize_newlines("a\r\n\r\nb") == "a\n\nb"

    @given(st.text())
    def test_lines_match_editor_split(self, text: str):
        """Property test: normalizing keeps the lines the editor would see."""
        normalized = normalize_newlines(text)

        assert normalized.splitlines() == text.splitlines()


class TestCharOffsetToLocation:

    def test_single_line(self):
        assert char_offset_to_location("Once upon a time", 11) == (0, 11)

    def test_multi_line(self):
        text = "first\nsecond\nthird"
        assert char_offset_to_location(text, 0) == (0, 0)
        assert char_offset_to_location(text, 6) == (1, 0)
        assert char_offset_to_location(text, 9) == (1, 3)
        assert char_offset_to_location(text, len(text)) == (2, 5)

    def test_offset_is_clamped(self):
        assert char_offset_to_location("abc", 10) == (0, 3)
        assert char_offset_to_location("abc", -1) == (0, 0)

    @given(st.text(), st.data())
    def test_location_indexes_same_character(self, text: str, data):
        """Property test: (row, column) points at the same character as the offset."""
        offset = data.draw(st.integers(min_value=0, max_value=len(text)))
        row, column = char_offset_to_location(text, offset)

        lines = text.split("\n")
        assert sum(len(line) + 1 for line in lines[:row]) + column == offset
        assert column <= len(lines[row])
