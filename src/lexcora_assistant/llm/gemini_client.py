"""Async Gemini client with Google Search grounding."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional, Sequence

from google import genai
from google.genai import types

from lexcora_assistant.domain.errors import ProviderError
from lexcora_assistant.domain.models import ChatMessage


def build_history(messages: Sequence[ChatMessage]) -> list[types.Content]:
    """Convert chat turns to the SDK history format, same order, one entry per turn."""
    return [
        types.Content(role=msg.role.value, parts=[types.Part(text=msg.text)])
        for msg in messages
    ]


def build_config(system_instruction: str) -> types.GenerateContentConfig:
    return types.GenerateContentConfig(
        system_instruction=system_instruction,
        tools=[types.Tool(google_search=types.GoogleSearch())],
    )


@dataclass
class GeminiClient:
    api_key: str
    client: Optional[Any] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if self.client is None:
            self.client = genai.Client(api_key=self.api_key)

    async def generate(self, model: str, contents: str, system_instruction: str) -> Any:
        try:
            return await self.client.aio.models.generate_content(
                model=model,
                contents=contents,
                config=build_config(system_instruction),
            )
        except Exception as exc:
            raise ProviderError(f"Gemini generate_content failed for {model}: {type(exc).__name__}: {exc}") from exc

    def create_chat(self, model: str, system_instruction: str, history: Sequence[ChatMessage] = ()) -> Any:
        try:
            return self.client.aio.chats.create(
                model=model,
                config=build_config(system_instruction),
                history=build_history(history),
            )
        except Exception as exc:
            raise ProviderError(f"Gemini chat creation failed for {model}: {type(exc).__name__}: {exc}") from exc

    async def send(self, chat: Any, message: str) -> Any:
        try:
            return await chat.send_message(message)
        except Exception as exc:
            raise ProviderError(f"Gemini send_message failed: {type(exc).__name__}: {exc}") from exc


__all__ = ["GeminiClient", "build_history", "build_config"]
