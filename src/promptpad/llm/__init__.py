from .base import CompletionProvider
from .errors import (
    CompletionError,
    CredentialMissingError,
    RequestSerializationError,
    ResponseDecodeError,
    TransportError,
)
from .factory import create_completion_provider
from .models import (
    ApiErrorObject,
    Choice,
    CompletionApiError,
    CompletionParams,
    CompletionResult,
    CompletionSuccess,
    Usage,
)
from .parsing import parse_completion_response
from .pending import CompletionOutcome, PendingCompletion, submit_completion
from .providers import OpenAICompletionsProvider

__all__ = [
    "ApiErrorObject",
    "Choice",
    "CompletionApiError",
    "CompletionError",
    "CompletionOutcome",
    "CompletionParams",
    "CompletionProvider",
    "CompletionResult",
    "CompletionSuccess",
    "CredentialMissingError",
    "OpenAICompletionsProvider",
    "PendingCompletion",
    "RequestSerializationError",
    "ResponseDecodeError",
    "TransportError",
    "Usage",
    "create_completion_provider",
    "parse_completion_response",
    "submit_completion",
]
