from .openai import OpenAICompletionsProvider

__all__ = ["OpenAICompletionsProvider"]
