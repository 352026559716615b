from typing import Any

from .base import CompletionProvider
from .providers import OpenAICompletionsProvider


def create_completion_provider(provider: str, **config: Any) -> CompletionProvider:
    """Create a completion provider instance.

    This factory function hides the instantiation logic for providers.

    Args:
        provider: Provider type ('openai')
        **config: Provider-specific configuration
            For OpenAI:
                - api_key: str (required)
                - model: str (default: 'text-davinci-003')
                - base_url: str | None
                - organization: str | None
                - params: CompletionParams | None

    Returns:
        Initialized completion provider instance

    Raises:
        ValueError: If provider type is not supported
        TypeError: If required configuration is missing

    Examples:
        >>> provider = create_completion_provider(
        ...     "openai",
        ...     api_key="sk-...",
        ...     model="text-davinci-003"
        ... )
    """
    provider_lower = provider.lower()

    if provider_lower == "openai":
        if "api_key" not in config:
            raise TypeError("OpenAI provider requires 'api_key' in config")
        return OpenAICompletionsProvider(**config)

    raise ValueError(
        f"Unsupported provider: {provider}. "
        f"Supported providers: 'openai'"
    )
