"""
Promptpad: a minimal terminal client for text-completion APIs.

Type a prompt, send it, and the returned continuation is appended to the
same editor and highlighted. Each subpackage hides one design decision:
llm hides the completion service, ui hides the presentation.
"""

__version__ = "0.1.0"

from .llm import (
    CompletionApiError,
    CompletionError,
    CompletionParams,
    CompletionProvider,
    CompletionSuccess,
    create_completion_provider,
    parse_completion_response,
    submit_completion,
)

__all__ = [
    "CompletionApiError",
    "CompletionError",
    "CompletionParams",
    "CompletionProvider",
    "CompletionSuccess",
    "create_completion_provider",
    "parse_completion_response",
    "submit_completion",
]
