"""LLM provider implementations."""

from pathlib import Path

from .base import LLMProvider
from .claude import ClaudeProvider
from .openai import OpenAIProvider


PROVIDERS: dict[str, type[LLMProvider]] = {
    "openai": OpenAIProvider,
    "claude": ClaudeProvider,
}


def create_provider(name: str, api_key: str, logs_dir: Path | None = None) -> LLMProvider:
    """Instantiate a provider by its config name."""
    try:
        provider_cls = PROVIDERS[name]
    except KeyError:
        raise ValueError(
            f"Unknown provider '{name}'. Choose one of: {', '.join(PROVIDERS)}"
        ) from None
    return provider_cls(api_key=api_key, logs_dir=logs_dir)


__all__ = [
    "LLMProvider",
    "ClaudeProvider",
    "OpenAIProvider",
    "PROVIDERS",
    "create_provider",
]
