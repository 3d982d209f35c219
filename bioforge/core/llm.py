"""Module-level LLM entry points.

Callers use these functions rather than provider objects so that the provider
choice stays a configuration concern and tests can patch a single name:

    from ..core.llm import simple_call_async, image_call_async
"""

import logging
from pathlib import Path

from ..config import get_api_key, get_config
from .providers import LLMProvider, create_provider


logger = logging.getLogger(__name__)

_providers: dict[str, LLMProvider] = {}


def get_provider(name: str) -> LLMProvider:
    """Return the shared provider instance for a config name."""
    provider = _providers.get(name)
    if provider is None:
        storage = get_config().storage
        logs_dir = Path(storage.logs_dir) if storage.log_requests else None
        provider = create_provider(name, get_api_key(name), logs_dir=logs_dir)
        _providers[name] = provider
        logger.debug(f"Created {name} provider")
    return provider


def get_text_provider() -> LLMProvider:
    return get_provider(get_config().providers.text_provider)


def get_image_provider() -> LLMProvider:
    return get_provider(get_config().providers.image_provider)


async def simple_call_async(
    prompt: str,
    response_schema: dict,
    schema_name: str = "response",
    model: str | None = None,
    max_tokens: int | None = None,
) -> dict:
    """Structured JSON call on the configured text provider."""
    model = model or get_config().providers.text_model
    return await get_text_provider().simple_call_async(
        prompt=prompt,
        response_schema=response_schema,
        schema_name=schema_name,
        model=model,
        max_tokens=max_tokens,
    )


async def image_call_async(
    prompt: str,
    model: str | None = None,
    size: str | None = None,
) -> list[str]:
    """Image generation on the configured image provider."""
    providers = get_config().providers
    return await get_image_provider().image_call_async(
        prompt=prompt,
        model=model or providers.image_model,
        size=size or providers.image_size,
    )


async def close_providers() -> None:
    """Close every cached provider client. Call before the event loop exits."""
    while _providers:
        _, provider = _providers.popitem()
        await provider.close_async()
