"""LLM provider factory."""

from chat_gateway.core.config import settings
from chat_gateway.core.errors import ConfigurationError
from chat_gateway.services.llm.base import BaseLLMProvider


def get_llm_provider(api_key: str) -> BaseLLMProvider:
    """Factory function that returns the configured LLM provider for one request."""
    if settings.llm_provider == "openai":
        from chat_gateway.services.llm.openai_provider import OpenAIProvider
        return OpenAIProvider(
            api_key=api_key,
            model=settings.openai_model,
            temperature=settings.temperature,
            max_tokens=settings.max_tokens,
        )
    else:
        raise ConfigurationError(f"Unknown LLM provider: {settings.llm_provider}")
