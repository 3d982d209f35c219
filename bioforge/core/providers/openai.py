"""OpenAI LLM Provider implementation."""

import json
import logging
import time
from pathlib import Path

from openai import AsyncOpenAI

from ...errors import ResponseValidationError
from .base import LLMProvider


logger = logging.getLogger(__name__)


def _extract_output_text(response) -> str | None:
    """Return the last output_text block of a Responses API result."""
    text = None
    for item in response.output:
        if hasattr(item, "type") and item.type == "message":
            for content_item in item.content:
                if (
                    hasattr(content_item, "type")
                    and content_item.type == "output_text"
                ):
                    if hasattr(content_item, "text"):
                        text = content_item.text
    return text


class OpenAIProvider(LLMProvider):
    """OpenAI LLM provider using the Responses API and the Images API."""

    name = "openai"

    def __init__(self, api_key: str = "", logs_dir: Path | None = None) -> None:
        if not api_key:
            raise ValueError(
                "OPENAI_API_KEY not found. Set it as an environment variable.\n"
                "  export OPENAI_API_KEY=sk-..."
            )
        super().__init__(api_key, logs_dir)

    @property
    def default_text_model(self) -> str:
        return "gpt-5-mini"

    @property
    def default_image_model(self) -> str:
        return "gpt-image-1"

    def _get_async_client(self) -> AsyncOpenAI:
        if self._cached_async_client is None:
            self._cached_async_client = AsyncOpenAI(api_key=self._api_key)
        return self._cached_async_client

    async def simple_call_async(
        self,
        prompt: str,
        response_schema: dict,
        schema_name: str = "response",
        model: str | None = None,
        max_tokens: int | None = None,
    ) -> dict:
        model = model or self.default_text_model
        client = self._get_async_client()

        request_params = {
            "model": model,
            "input": prompt,
            "text": {
                "format": {
                    "type": "json_schema",
                    "name": schema_name,
                    "strict": True,
                    "schema": response_schema,
                }
            },
        }

        if max_tokens is not None:
            request_params["max_output_tokens"] = max_tokens

        logger.info(f"[LLM] simple_call starting - model={model}, schema={schema_name}")
        logger.info(f"[LLM] prompt length: {len(prompt)} chars")

        api_start = time.time()
        response = await client.responses.create(**request_params)
        api_elapsed = time.time() - api_start

        logger.info(f"[LLM] API response received in {api_elapsed:.2f}s")
        self._log("simple_call", request_params, response)

        text = _extract_output_text(response)
        if not text:
            return {}
        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise ResponseValidationError(
                f"{schema_name} response is not valid JSON: {e}"
            ) from e

    async def image_call_async(
        self,
        prompt: str,
        model: str | None = None,
        size: str = "1024x1024",
    ) -> list[str]:
        model = model or self.default_image_model
        client = self._get_async_client()

        request_params = {
            "model": model,
            "prompt": prompt,
            "size": size,
            "n": 1,
        }

        logger.info(f"[LLM] image_call starting - model={model}, size={size}")

        api_start = time.time()
        response = await client.images.generate(**request_params)
        api_elapsed = time.time() - api_start

        logger.info(f"[LLM] image response received in {api_elapsed:.2f}s")
        self._log("image_call", request_params, response)

        payloads: list[str] = []
        for item in response.data or []:
            if getattr(item, "b64_json", None):
                payloads.append(f"data:image/png;base64,{item.b64_json}")
            elif getattr(item, "url", None):
                payloads.append(item.url)
        return payloads
