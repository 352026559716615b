"""Provider factory functions for CLI.

Centralizes reading the API token and creating the completion provider.
Hides configuration details from the command implementation.
"""

from pathlib import Path
from typing import Any

from ..llm import CredentialMissingError, create_completion_provider


def read_api_token(path: Path) -> str:
    """Read the API token from a plain-text file.

    Args:
        path: Token file, relative paths resolve against the working directory

    Returns:
        Token with surrounding whitespace removed

    Raises:
        CredentialMissingError: If the file is missing, unreadable or empty
    """
    try:
        token = path.read_text(encoding="utf-8").strip()
    except (OSError, UnicodeDecodeError) as e:
        raise CredentialMissingError(path) from e
    if not token:
        raise CredentialMissingError(path)
    return token


def get_llm(api_key: str, model: str | None = None, base_url: str | None = None) -> Any:
    """Create the completion provider.

    Args:
        api_key: OpenAI API key
        model: Completion model, None keeps the default
        base_url: API base URL, None keeps the public endpoint

    Returns:
        OpenAI completions provider instance
    """
    return create_completion_provider(
        "openai",
        api_key=api_key,
        model=model,
        base_url=base_url,
    )
