"""Tests for the OpenAI provider and the provider factory."""

import asyncio
from types import SimpleNamespace
from unittest.mock import AsyncMock, patch

import pytest
from openai import OpenAIError

from chat_gateway.core.config import settings
from chat_gateway.core.errors import ConfigurationError, UpstreamError
from chat_gateway.services.llm import get_llm_provider
from chat_gateway.services.llm.base import Message
from chat_gateway.services.llm.openai_provider import OpenAIProvider


def _completion(*contents):
    return SimpleNamespace(
        choices=[SimpleNamespace(message=SimpleNamespace(content=c)) for c in contents]
    )


@pytest.fixture
def openai_client():
    with patch("chat_gateway.services.llm.openai_provider.AsyncOpenAI") as client_cls:
        client = client_cls.return_value
        client.chat.completions.create = AsyncMock(return_value=_completion("hi there"))
        yield client_cls, client


def test_chat_sends_prompt_and_parameters(openai_client):
    client_cls, client = openai_client
    provider = OpenAIProvider(api_key="sk-test")
    messages = [Message(role="system", content="be kind"), Message(role="user", content="hello")]

    response = asyncio.run(provider.chat(messages))

    assert response.content == "hi there"
    client_cls.assert_called_once_with(api_key="sk-test")
    client.chat.completions.create.assert_awaited_once_with(
        model="gpt-4o",
        messages=[
            {"role": "system", "content": "be kind"},
            {"role": "user", "content": "hello"},
        ],
        temperature=0.7,
        max_tokens=1000,
    )


def test_chat_takes_first_choice(openai_client):
    _, client = openai_client
    client.chat.completions.create.return_value = _completion("first", "second")
    response = asyncio.run(OpenAIProvider(api_key="sk-test").chat([]))
    assert response.content == "first"


def test_chat_without_choices_is_empty(openai_client):
    _, client = openai_client
    client.chat.completions.create.return_value = _completion()
    response = asyncio.run(OpenAIProvider(api_key="sk-test").chat([]))
    assert response.content == ""


def test_chat_with_null_content_is_empty(openai_client):
    _, client = openai_client
    client.chat.completions.create.return_value = _completion(None)
    response = asyncio.run(OpenAIProvider(api_key="sk-test").chat([]))
    assert response.content == ""


def test_openai_errors_become_upstream_errors(openai_client):
    _, client = openai_client
    client.chat.completions.create.side_effect = OpenAIError("Incorrect API key provided")

    with pytest.raises(UpstreamError) as exc_info:
        asyncio.run(OpenAIProvider(api_key="sk-bad").chat([]))

    assert exc_info.value.to_dict() == {
        "error": "Internal server error",
        "details": "Incorrect API key provided",
    }


def test_factory_builds_openai_provider(openai_client, monkeypatch):
    monkeypatch.setattr(settings, "openai_model", "gpt-4o-mini")
    provider = get_llm_provider("sk-request")
    assert isinstance(provider, OpenAIProvider)
    assert provider.model == "gpt-4o-mini"
    assert provider.temperature == settings.temperature
    assert provider.max_tokens == settings.max_tokens


def test_factory_rejects_unknown_provider(monkeypatch):
    monkeypatch.setattr(settings, "llm_provider", "gemini")
    with pytest.raises(ConfigurationError):
        get_llm_provider("sk-request")
