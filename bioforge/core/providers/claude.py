"""Claude (Anthropic) LLM Provider implementation."""

import json
import logging
import time
from pathlib import Path

import anthropic

from ...errors import ProviderCapabilityError
from .base import LLMProvider


logger = logging.getLogger(__name__)


def _extract_json_from_text(text: str) -> dict | None:
    """Try to extract JSON from text, handling code blocks."""
    # Try direct parse first
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        pass

    # Try to find JSON in code block
    if "```json" in text:
        start = text.find("```json") + 7
        end = text.find("```", start)
        if end > start:
            try:
                return json.loads(text[start:end].strip())
            except json.JSONDecodeError:
                pass

    if "```" in text:
        start = text.find("```") + 3
        # Skip language identifier if present
        newline = text.find("\n", start)
        if newline > start:
            start = newline + 1
        end = text.find("```", start)
        if end > start:
            try:
                return json.loads(text[start:end].strip())
            except json.JSONDecodeError:
                pass

    return None


class ClaudeProvider(LLMProvider):
    """Claude (Anthropic) LLM provider.

    Supports both API key (sk-ant-...) and OAuth access token authentication.
    Text only: Claude has no image generation endpoint.
    """

    name = "claude"

    def __init__(self, api_key: str = "", logs_dir: Path | None = None) -> None:
        if not api_key:
            raise ValueError(
                "Anthropic credentials not found. Set one of:\n"
                "  export ANTHROPIC_API_KEY=sk-ant-...       # API key\n"
                "  export ANTHROPIC_ACCESS_TOKEN=...         # OAuth token\n"
                "Get your key from: https://console.anthropic.com/settings/keys"
            )
        super().__init__(api_key, logs_dir)

    @property
    def default_text_model(self) -> str:
        return "claude-haiku-4-5-20251001"

    @property
    def default_image_model(self) -> None:
        return None

    def _is_oauth_token(self) -> bool:
        """Check if the credential is an OAuth access token (not an API key)."""
        return not self._api_key.startswith("sk-ant-")

    def _get_async_client(self) -> anthropic.AsyncAnthropic:
        if self._cached_async_client is None:
            if self._is_oauth_token():
                self._cached_async_client = anthropic.AsyncAnthropic(
                    auth_token=self._api_key,
                )
            else:
                self._cached_async_client = anthropic.AsyncAnthropic(
                    api_key=self._api_key
                )
        return self._cached_async_client

    def _build_json_prompt(self, prompt: str, response_schema: dict) -> str:
        """Add JSON schema instruction to prompt."""
        return (
            f"{prompt}\n\n"
            f"Respond with valid JSON matching this schema:\n"
            f"```json\n{json.dumps(response_schema, indent=2)}\n```\n"
            f"Return ONLY the JSON object, no other text."
        )

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

        full_prompt = self._build_json_prompt(prompt, response_schema)

        logger.info(
            f"[Claude] simple_call starting - model={model}, schema={schema_name}"
        )

        api_start = time.time()
        response = await client.messages.create(
            model=model,
            max_tokens=max_tokens or 4096,
            messages=[{"role": "user", "content": full_prompt}],
        )
        logger.info(f"[Claude] API response received in {time.time() - api_start:.2f}s")

        self._log(
            "simple_call",
            {"model": model, "prompt_length": len(full_prompt)},
            response,
        )

        # Extract structured data from text response
        structured_data = None
        for block in response.content:
            if block.type == "text":
                structured_data = _extract_json_from_text(block.text)
                if structured_data:
                    break

        return structured_data or {}

    async def image_call_async(
        self,
        prompt: str,
        model: str | None = None,
        size: str = "1024x1024",
    ) -> list[str]:
        raise ProviderCapabilityError(
            "Claude cannot generate images. Set providers.image_provider to 'openai'."
        )
