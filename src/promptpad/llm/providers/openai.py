import json
from typing import Any

import httpx
from openai import APIConnectionError, APIStatusError, AsyncOpenAI

from ..base import CompletionProvider
from ..errors import RequestSerializationError, TransportError
from ..models import CompletionApiError, CompletionParams, CompletionResult
from ..parsing import parse_completion_response

# Bodies longer than this are cut in trace output
MAX_TRACE_LENGTH = 2000


def _truncate(text: str, limit: int = MAX_TRACE_LENGTH) -> str:
    if len(text) <= limit:
        return text
    return text[:limit] + "... (truncated)"


class OpenAICompletionsProvider(CompletionProvider):
    """OpenAI legacy Completions API provider.

    Hidden design decisions:
    - AsyncOpenAI client initialization and authentication
    - Raw response access, so error payloads are decoded like any other body
    - Which SDK exceptions count as transport failures
    """

    def __init__(
        self,
        api_key: str,
        model: str | None = None,
        base_url: str | None = None,
        organization: str | None = None,
        params: CompletionParams | None = None,
        **client_kwargs: Any
    ):
        """Initialize OpenAI completions provider.

        Args:
            api_key: OpenAI API key
            model: Model to use (overrides params.model)
            base_url: Optional custom API base URL
            organization: Optional organization ID
            params: Generation parameters (defaults to CompletionParams())
            **client_kwargs: Additional kwargs for AsyncOpenAI client
        """
        super().__init__()
        params = params or CompletionParams()
        if model is not None:
            params = params.model_copy(update={"model": model})
        self._params = params
        # Every request is attempted once; resubmitting is the user's call
        client_kwargs.setdefault("max_retries", 0)
        self._client = AsyncOpenAI(
            api_key=api_key,
            base_url=base_url,
            organization=organization,
            **client_kwargs
        )

    @property
    def model(self) -> str:
        """Get the model name."""
        return self._params.model

    @property
    def params(self) -> CompletionParams:
        return self._params

    def encode_request(self, prompt: str) -> dict[str, Any]:
        """Build the request body and check that it encodes as UTF-8 JSON.

        Raises:
            RequestSerializationError: If the body cannot be encoded
        """
        body = self._params.request_body(prompt)
        try:
            encoded = json.dumps(body, ensure_ascii=False).encode("utf-8")
        except (TypeError, ValueError) as e:
            raise RequestSerializationError(f"ERROR: {e}") from e
        self._debug("debug", "LLM", f"Request: {_truncate(encoded.decode('utf-8'))}")
        return body

    async def complete(self, prompt: str) -> CompletionResult:
        """Request a completion from the OpenAI Completions API.

        Any HTTP response counts as delivered: non-2xx bodies are decoded
        too, which is how API rejections become CompletionApiError results.

        Args:
            prompt: Text to continue

        Returns:
            CompletionSuccess or CompletionApiError

        Raises:
            RequestSerializationError: If the body cannot be encoded
            TransportError: If no HTTP response was received
            ResponseDecodeError: If the body matches neither response shape
        """
        body = self.encode_request(prompt)

        try:
            raw = await self._client.completions.with_raw_response.create(**body)
            http_response = raw.http_response
        except APIStatusError as e:
            http_response = e.response
        except (APIConnectionError, httpx.HTTPError) as e:
            # The SDK wraps the httpx failure; its text names the actual cause
            message = f"{e} {e.__cause__}" if e.__cause__ is not None else str(e)
            self._debug("error", "LLM", f"Transport failure: {message}")
            raise TransportError(message) from e

        content = http_response.content
        self._debug(
            "debug",
            "LLM",
            f"Response ({http_response.status_code}): "
            f"{_truncate(content.decode('utf-8', errors='replace'))}",
        )

        result = parse_completion_response(content)
        if isinstance(result, CompletionApiError):
            self._debug("warning", "LLM", f"API error: {result.error.type}: {result.error.message}")
        return result

    async def close(self) -> None:
        """Close the OpenAI client."""
        await self._client.close()
