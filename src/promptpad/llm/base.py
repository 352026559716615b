from abc import ABC, abstractmethod
from typing import Any

from .models import CompletionResult


class CompletionProvider(ABC):
    """Abstract base class for text-completion providers.

    This module hides the design decision of which completion service to use.
    Implementations must handle provider-specific details like:
    - API client setup and authentication
    - Request encoding
    - Mapping transport failures onto CompletionError subclasses

    Supports async context manager protocol for proper resource cleanup:
        async with provider:
            result = await provider.complete("Once upon a")
    """

    def __init__(self) -> None:
        self._debug_callback: Any | None = None

    def set_debug_callback(self, callback: Any) -> None:
        """Set the debug callback for request tracing.

        Args:
            callback: Callable(level: str, component: str, message: str)
                      level: 'debug', 'info', 'warning', 'error'
        """
        self._debug_callback = callback

    def _debug(self, level: str, component: str, message: str) -> None:
        if self._debug_callback:
            self._debug_callback(level, component, message)

    @abstractmethod
    async def complete(self, prompt: str) -> CompletionResult:
        """Request a completion for a prompt.

        Args:
            prompt: Text to continue

        Returns:
            CompletionSuccess, or CompletionApiError if the service rejected
            the request

        Raises:
            CompletionError: Serialization, transport or decode failure
        """
        pass

    @abstractmethod
    async def close(self) -> None:
        """Close any open connections or resources."""
        pass

    async def __aenter__(self) -> "CompletionProvider":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit with automatic cleanup.

        Note: Suppresses "Event loop is closed" errors during cleanup,
        a known race in httpx/anyio shutdown:
        https://github.com/encode/httpx/issues/914
        """
        try:
            await self.close()
        except RuntimeError as e:
            if "Event loop is closed" not in str(e):
                raise
