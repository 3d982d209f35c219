"""Abstract base class for LLM providers."""

import json
import logging
from abc import ABC, abstractmethod
from datetime import datetime
from pathlib import Path
from typing import Any


logger = logging.getLogger(__name__)


def log_request_response(
    logs_dir: Path,
    provider: str,
    function_name: str,
    request: dict,
    response: Any,
) -> Path:
    """Log full request and response to a JSON file."""
    logs_dir.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S_%f")
    log_file = logs_dir / f"{timestamp}_{provider}_{function_name}.json"

    # Convert response to dict if possible
    if hasattr(response, "model_dump"):
        try:
            response_dict = response.model_dump(mode="json", warnings=False)
        except Exception:
            response_dict = str(response)
    else:
        response_dict = str(response)

    log_data = {
        "timestamp": datetime.now().isoformat(),
        "function": function_name,
        "provider": provider,
        "request": request,
        "response": response_dict,
    }

    with open(log_file, "w") as f:
        json.dump(log_data, f, indent=2, default=str)
    return log_file


class LLMProvider(ABC):
    """Abstract base class for LLM providers.

    All providers must implement these methods with the same signatures
    to ensure drop-in compatibility.

    Args:
        api_key: API key or access token for the provider.
        logs_dir: If set, every request/response pair is dumped there as JSON.
    """

    name: str = "base"

    def __init__(self, api_key: str, logs_dir: Path | None = None) -> None:
        self._api_key = api_key
        self._logs_dir = logs_dir
        self._cached_async_client = None

    async def close_async(self) -> None:
        """Close the cached async client to release connections cleanly.

        Must be called before the event loop shuts down to avoid
        'Event loop is closed' errors from orphaned httpx connections.
        """
        if self._cached_async_client is not None:
            await self._cached_async_client.close()
            self._cached_async_client = None

    def _log(self, function_name: str, request: dict, response: Any) -> None:
        if self._logs_dir is None:
            return
        try:
            log_request_response(
                self._logs_dir, self.name, function_name, request, response
            )
        except OSError as e:
            logger.warning(f"[{self.name}] could not write request log: {e}")

    @property
    @abstractmethod
    def default_text_model(self) -> str:
        """Default model for structured text generation."""
        ...

    @property
    @abstractmethod
    def default_image_model(self) -> str | None:
        """Default model for image generation, None if unsupported."""
        ...

    @abstractmethod
    async def simple_call_async(
        self,
        prompt: str,
        response_schema: dict,
        schema_name: str = "response",
        model: str | None = None,
        max_tokens: int | None = None,
    ) -> dict:
        """Single structured-output call. Returns the decoded JSON object."""
        ...

    @abstractmethod
    async def image_call_async(
        self,
        prompt: str,
        model: str | None = None,
        size: str = "1024x1024",
    ) -> list[str]:
        """Generate images for a prompt.

        Returns:
            Every image payload in the response, each as a ``data:`` URI or a
            URL. May be empty; callers decide whether that is an error.
        """
        ...
