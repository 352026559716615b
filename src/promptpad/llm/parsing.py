import json

from pydantic import ValidationError

from .errors import ResponseDecodeError
from .models import CompletionApiError, CompletionResult, CompletionSuccess


def parse_completion_response(body: bytes | str) -> CompletionResult:
    """Decode a completions response body into a tagged result.

    The API does not label its payloads, so the shape decides: a top-level
    ``error`` key means an error payload, otherwise a ``choices`` key means a
    success payload. The error shape is tested first so that a body carrying
    both keys is never read as a success.

    Args:
        body: Raw response body

    Returns:
        CompletionSuccess or CompletionApiError

    Raises:
        ResponseDecodeError: If the body is not JSON or matches neither shape
    """
    try:
        payload = json.loads(body)
    except ValueError as e:
        raise ResponseDecodeError(f"ERROR: {e}") from e

    if not isinstance(payload, dict):
        raise ResponseDecodeError(
            f"ERROR: expected a JSON object, got {type(payload).__name__}"
        )

    try:
        if "error" in payload:
            return CompletionApiError.model_validate(payload)
        if "choices" in payload:
            return CompletionSuccess.model_validate(payload)
    except ValidationError as e:
        raise ResponseDecodeError(f"ERROR: {e}") from e

    raise ResponseDecodeError("ERROR: response has neither 'error' nor 'choices'")
