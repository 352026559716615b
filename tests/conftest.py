"""Pytest configuration and shared fixtures."""
import asyncio
import json
import os

import httpx
import pytest

from promptpad.llm import CompletionError, CompletionProvider, OpenAICompletionsProvider
from promptpad.llm.models import CompletionResult


def _success_payload(text: str = " time") -> dict:
    return {
        "id": "cmpl-123",
        "object": "text_completion",
        "created": 1670000000,
        "model": "text-davinci-003",
        "choices": [{"text": text, "index": 0, "finish_reason": "stop"}],
        "usage": {"prompt_tokens": 3, "completion_tokens": 2, "total_tokens": 5},
    }


def _error_payload(error_type: str = "invalid_request_error") -> dict:
    return {
        "error": {
            "message": "The model `nope` does not exist",
            "type": error_type,
            "param": None,
            "code": "model_not_found",
        }
    }


class FakeProvider(CompletionProvider):
    """In-memory provider whose requests resolve when the test says so."""

    def __init__(self) -> None:
        super().__init__()
        self.prompts: list[str] = []
        self._gates: list[asyncio.Event] = []
        self._outcomes: list[CompletionResult | CompletionError] = []
        self.auto_release = True
        self.closed = False

    def queue(self, outcome: CompletionResult | CompletionError) -> None:
        """Queue the outcome of the next request."""
        self._outcomes.append(outcome)

    def release(self, index: int = -1) -> None:
        """Let a held request resolve."""
        self._gates[index].set()

    async def complete(self, prompt: str) -> CompletionResult:
        self.prompts.append(prompt)
        gate = asyncio.Event()
        self._gates.append(gate)
        outcome = self._outcomes.pop(0)
        if self.auto_release:
            gate.set()
        await gate.wait()
        if isinstance(outcome, CompletionError):
            raise outcome
        return outcome

    async def close(self) -> None:
        self.closed = True


@pytest.fixture(scope="session")
def api_keys():
    """Return API keys from environment."""
    return {
        "openai": os.getenv("OPENAI_API_KEY"),
    }


@pytest.fixture
def fake_provider():
    return FakeProvider()


@pytest.fixture
def mock_provider():
    """Build an OpenAI provider whose HTTP traffic goes to a handler function.

    The handler receives the httpx.Request and returns an httpx.Response
    (or raises an httpx exception to simulate a transport failure). Every
    request seen is recorded in the returned list.
    """
    def _make(handler):
        seen: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return handler(request)

        provider = OpenAICompletionsProvider(
            api_key="sk-test",
            base_url="https://api.test/v1",
            http_client=httpx.AsyncClient(transport=httpx.MockTransport(_record)),
        )
        return provider, seen

    return _make


def _json_response(payload, status_code: int = 200) -> httpx.Response:
    return httpx.Response(
        status_code,
        content=json.dumps(payload).encode("utf-8"),
        headers={"content-type": "application/json"},
    )


@pytest.fixture(scope="session")
def success_payload():
    """Return a builder for successful completion bodies."""
    return _success_payload


@pytest.fixture(scope="session")
def error_payload():
    """Return a builder for API error bodies."""
    return _error_payload


@pytest.fixture(scope="session")
def json_response():
    """Return a builder for JSON httpx responses."""
    return _json_response
