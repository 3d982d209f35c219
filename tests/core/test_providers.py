"""Tests for LLM providers with mocked SDK clients."""

import asyncio
import json
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from bioforge.config import BioforgeConfig, set_config
from bioforge.core import llm
from bioforge.core.providers import ClaudeProvider, OpenAIProvider, create_provider
from bioforge.core.providers.claude import _extract_json_from_text
from bioforge.errors import ProviderCapabilityError, ResponseValidationError


def _responses_result(text: str):
    return SimpleNamespace(
        output=[
            SimpleNamespace(type="reasoning"),
            SimpleNamespace(
                type="message",
                content=[SimpleNamespace(type="output_text", text=text)],
            ),
        ]
    )


class TestOpenAIProvider:
    """Tests for the OpenAI provider."""

    def test_missing_key(self):
        with pytest.raises(ValueError, match="OPENAI_API_KEY"):
            OpenAIProvider(api_key="")

    def test_simple_call_async_decodes_json(self):
        provider = OpenAIProvider(api_key="sk-test")
        client = MagicMock()
        client.responses.create = AsyncMock(return_value=_responses_result('{"name": "x"}'))

        with patch.object(provider, "_get_async_client", return_value=client):
            result = asyncio.run(
                provider.simple_call_async("prompt", {"type": "object"}, schema_name="s")
            )

        assert result == {"name": "x"}
        params = client.responses.create.call_args.kwargs
        assert params["model"] == "gpt-5-mini"
        assert params["text"]["format"]["strict"] is True
        assert params["text"]["format"]["name"] == "s"

    def test_simple_call_async_invalid_json(self):
        provider = OpenAIProvider(api_key="sk-test")
        client = MagicMock()
        client.responses.create = AsyncMock(return_value=_responses_result("{oops"))

        with patch.object(provider, "_get_async_client", return_value=client):
            with pytest.raises(ResponseValidationError):
                asyncio.run(provider.simple_call_async("prompt", {}))

    def test_image_call_async_collects_payloads(self):
        provider = OpenAIProvider(api_key="sk-test")
        client = MagicMock()
        client.images.generate = AsyncMock(
            return_value=SimpleNamespace(
                data=[
                    SimpleNamespace(b64_json="aGVsbG8=", url=None),
                    SimpleNamespace(b64_json=None, url="https://img/2.png"),
                ]
            )
        )

        with patch.object(provider, "_get_async_client", return_value=client):
            payloads = asyncio.run(provider.image_call_async("a cactus"))

        assert payloads == ["data:image/png;base64,aGVsbG8=", "https://img/2.png"]
        assert client.images.generate.call_args.kwargs["model"] == "gpt-image-1"

    def test_image_call_async_empty(self):
        provider = OpenAIProvider(api_key="sk-test")
        client = MagicMock()
        client.images.generate = AsyncMock(return_value=SimpleNamespace(data=None))

        with patch.object(provider, "_get_async_client", return_value=client):
            assert asyncio.run(provider.image_call_async("a cactus")) == []

    def test_request_log_written(self, tmp_path):
        provider = OpenAIProvider(api_key="sk-test", logs_dir=tmp_path / "logs")
        client = MagicMock()
        client.responses.create = AsyncMock(return_value=_responses_result("{}"))

        with patch.object(provider, "_get_async_client", return_value=client):
            asyncio.run(provider.simple_call_async("prompt", {}))

        logs = list((tmp_path / "logs").glob("*_openai_simple_call.json"))
        assert len(logs) == 1
        assert json.loads(logs[0].read_text())["provider"] == "openai"


class TestClaudeProvider:
    """Tests for the Claude provider."""

    def test_missing_key(self):
        with pytest.raises(ValueError, match="Anthropic credentials"):
            ClaudeProvider(api_key="")

    def test_image_generation_unsupported(self):
        provider = ClaudeProvider(api_key="sk-ant-test")
        with pytest.raises(ProviderCapabilityError):
            asyncio.run(provider.image_call_async("a cactus"))

    def test_simple_call_async_extracts_json(self):
        provider = ClaudeProvider(api_key="sk-ant-test")
        client = MagicMock()
        client.messages.create = AsyncMock(
            return_value=SimpleNamespace(
                content=[SimpleNamespace(type="text", text='```json\n{"name": "x"}\n```')]
            )
        )

        with patch.object(provider, "_get_async_client", return_value=client):
            result = asyncio.run(provider.simple_call_async("prompt", {"type": "object"}))

        assert result == {"name": "x"}
        prompt = client.messages.create.call_args.kwargs["messages"][0]["content"]
        assert "Return ONLY the JSON object" in prompt

    @pytest.mark.parametrize(
        "text,expected",
        [
            ('{"a": 1}', {"a": 1}),
            ('Here:\n```json\n{"a": 2}\n```', {"a": 2}),
            ('```\n{"a": 3}\n```', {"a": 3}),
            ("no json here", None),
        ],
    )
    def test_extract_json_from_text(self, text, expected):
        assert _extract_json_from_text(text) == expected


class TestProviderFacade:
    """Tests for the module-level call functions."""

    def test_unknown_provider(self):
        with pytest.raises(ValueError, match="Unknown provider"):
            create_provider("gemini", "key")

    def test_providers_selected_from_config(self, monkeypatch):
        monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
        monkeypatch.setenv("ANTHROPIC_API_KEY", "sk-ant-test")
        config = BioforgeConfig.load()
        config = config.set_value("providers.text_provider", "claude")
        set_config(config)

        assert isinstance(llm.get_text_provider(), ClaudeProvider)
        assert isinstance(llm.get_image_provider(), OpenAIProvider)
        assert llm.get_text_provider() is llm.get_text_provider()

    def test_image_call_uses_configured_size(self, monkeypatch):
        monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
        set_config(BioforgeConfig.load().set_value("providers.image_size", "1536x1024"))
        provider = llm.get_image_provider()

        with patch.object(provider, "image_call_async", new_callable=AsyncMock) as mock_image:
            mock_image.return_value = ["https://img/1.png"]
            asyncio.run(llm.image_call_async("prompt"))

        assert mock_image.call_args.kwargs["size"] == "1536x1024"
        assert mock_image.call_args.kwargs["model"] is None
