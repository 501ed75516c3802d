import asyncio
from types import SimpleNamespace

import pytest

from lexcora_assistant.domain.errors import ProviderError
from lexcora_assistant.domain.models import ChatMessage, Role
from lexcora_assistant.llm import provider
from lexcora_assistant.llm.gemini_client import GeminiClient, build_config, build_history
from lexcora_assistant.services.credentials import CredentialGate


class FakeAsyncChat:
    def __init__(self, reply=None, error=None):
        self.reply = reply
        self.error = error
        self.messages = []

    async def send_message(self, message):
        self.messages.append(message)
        if self.error:
            raise self.error
        return self.reply


def _sdk(generate=None, chat=None):
    captured = {}

    async def generate_content(model, contents, config):
        captured["generate"] = {"model": model, "contents": contents, "config": config}
        if isinstance(generate, Exception):
            raise generate
        return generate

    def create(model, config, history):
        captured["chat"] = {"model": model, "config": config, "history": history}
        return chat

    sdk = SimpleNamespace(aio=SimpleNamespace(models=SimpleNamespace(generate_content=generate_content), chats=SimpleNamespace(create=create)))
    return sdk, captured


def test_build_history_preserves_order_roles_and_text():
    history = [ChatMessage(role=Role.USER, text="q1"), ChatMessage(role=Role.MODEL, text="a1"), ChatMessage(role=Role.USER, text="q2")]
    contents = build_history(history)
    assert [(c.role, c.parts[0].text) for c in contents] == [("user", "q1"), ("model", "a1"), ("user", "q2")]
    assert build_history([]) == []


def test_build_config_enables_google_search():
    config = build_config("instruction")
    assert config.system_instruction == "instruction"
    assert config.tools[0].google_search is not None


def test_generate_passes_instruction_and_tools():
    sdk, captured = _sdk(generate="response")
    client = GeminiClient(api_key="k", client=sdk)
    out = asyncio.run(client.generate("gemini-2.5-flash", "question", "sys"))
    assert out == "response"
    assert captured["generate"]["model"] == "gemini-2.5-flash"
    assert captured["generate"]["contents"] == "question"
    assert captured["generate"]["config"].system_instruction == "sys"


def test_generate_wraps_sdk_errors():
    sdk, _ = _sdk(generate=RuntimeError("quota exceeded"))
    client = GeminiClient(api_key="k", client=sdk)
    with pytest.raises(ProviderError):
        asyncio.run(client.generate("m", "q", "sys"))


def test_chat_create_and_send():
    chat = FakeAsyncChat(reply="pong")
    sdk, captured = _sdk(chat=chat)
    client = GeminiClient(api_key="k", client=sdk)
    handle = client.create_chat("gemini-3-pro-preview", "sys", [ChatMessage(role="user", text="hi")])
    assert handle is chat
    assert captured["chat"]["history"][0].parts[0].text == "hi"
    assert asyncio.run(client.send(handle, "ping")) == "pong"
    assert chat.messages == ["ping"]


def test_send_wraps_sdk_errors():
    sdk, _ = _sdk()
    client = GeminiClient(api_key="k", client=sdk)
    with pytest.raises(ProviderError):
        asyncio.run(client.send(FakeAsyncChat(error=ConnectionError("reset")), "ping"))


def test_get_client_none_without_credential():
    assert provider.get_client(CredentialGate()) is None


def test_get_client_builds_gemini(monkeypatch):
    created = []

    class Dummy:
        def __init__(self, api_key):
            created.append(api_key)

    monkeypatch.setattr(provider, "GeminiClient", Dummy)
    provider._gemini_client.cache_clear()
    client = provider.get_client(CredentialGate(api_key="k1"))
    assert isinstance(client, Dummy)
    assert provider.get_client(CredentialGate(api_key="k1")) is client
    assert created == ["k1"]
    provider._gemini_client.cache_clear()

