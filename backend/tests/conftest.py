"""Shared test fixtures for backend tests."""

from unittest.mock import AsyncMock, patch

import pytest
from fastapi.testclient import TestClient

from chat_gateway.core.config import settings
from chat_gateway.core.store import ChatStore
from chat_gateway.main import app
from chat_gateway.services.llm.base import LLMResponse

FAKE_REPLY = "お話ししてくださってありがとうございます。"


@pytest.fixture(autouse=True)
def api_key(monkeypatch):
    """Every test starts with a server-side key configured."""
    monkeypatch.setattr(settings, "openai_api_key", "sk-server")
    return "sk-server"


@pytest.fixture
def fake_reply():
    return FAKE_REPLY


@pytest.fixture
def fake_provider():
    """Mock LLM provider that answers every prompt with FAKE_REPLY."""
    provider = AsyncMock()
    provider.chat.return_value = LLMResponse(content=FAKE_REPLY)
    return provider


@pytest.fixture
def llm_factory(fake_provider):
    with patch("chat_gateway.api.chat.get_llm_provider", return_value=fake_provider) as factory:
        yield factory


@pytest.fixture
def client(llm_factory):
    """FastAPI TestClient with a fresh store and the LLM patched out."""
    with TestClient(app) as c:
        yield c


@pytest.fixture
def store():
    chat_store = ChatStore()
    yield chat_store
    chat_store.close()
