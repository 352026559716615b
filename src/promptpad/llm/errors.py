"""Errors raised while requesting a completion.

Every recoverable failure derives from CompletionError and ends up as a single
line of text in the UI. A rejection by the API itself is not an exception: it
arrives as a CompletionApiError result.
"""

from pathlib import Path


class CompletionError(Exception):
    """Base class for recoverable completion failures."""

    kind = "completion"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class RequestSerializationError(CompletionError):
    """The request body could not be encoded."""

    kind = "serialization"


class TransportError(CompletionError):
    """The HTTP request did not produce a response."""

    kind = "transport"


class ResponseDecodeError(CompletionError):
    """The response body matched neither the success nor the error shape."""

    kind = "decode"


class CredentialMissingError(Exception):
    """The API token file is missing or empty."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"API token not found in {path}")
        self.path = path
