"""Multi-turn legal chat sessions backed by a provider chat context."""

from __future__ import annotations

import asyncio
from typing import Any, Iterable, List, Optional

from lexcora_assistant.domain import messages
from lexcora_assistant.domain.models import AssistantResponse, ChatMessage, Language
from lexcora_assistant.llm.citations import extract_sources, extract_text
from lexcora_assistant.llm.instructions import compose_chat
from lexcora_assistant.llm.provider import get_client, llm_settings
from lexcora_assistant.logging import get_logger
from lexcora_assistant.services.credentials import CredentialGate, load_gate

logger = get_logger(__name__)

DEMO = "demo"
LIVE = "live"


class LegalChatSession:
    """One conversation with the assistant.

    A session is ``demo`` for its whole lifetime when no credential exists;
    otherwise it is ``live`` and owns a provider chat context seeded with the
    chat instruction and ``history``. Once live, the provider context holds
    the turn history; each send forwards only the new message.
    """

    def __init__(
        self,
        language: Language | str,
        history: Optional[Iterable[ChatMessage]] = None,
        *,
        gate: Optional[CredentialGate] = None,
        client=None,
        config=None,
    ) -> None:
        self.language = Language.parse(language)
        self._llm = llm_settings(config)
        self._client = None
        self._chat: Optional[Any] = None
        self._lock: Optional[asyncio.Lock] = None
        self._lock_loop: Optional[asyncio.AbstractEventLoop] = None
        gate = gate or load_gate(config)
        self.mode = LIVE if gate.available() else DEMO
        if self.mode == DEMO:
            logger.info("No model credential; chat session in demo mode", extra={"language": self.language.value})
            return

        prior: List[ChatMessage] = list(history or [])
        try:
            self._client = client or get_client(gate, config)
            self._chat = self._client.create_chat(
                model=self._llm.chat_model,
                system_instruction=compose_chat(self.language),
                history=prior,
            )
        except Exception as exc:
            logger.exception(
                "Gemini chat context creation failed",
                extra={"language": self.language.value, "model": self._llm.chat_model, "error_type": type(exc).__name__},
            )
            self._chat = None

    def _send_lock(self) -> asyncio.Lock:
        # one lock per running loop; a lock is bound to the loop it first waits on
        loop = asyncio.get_running_loop()
        if self._lock is None or self._lock_loop is not loop:
            self._lock = asyncio.Lock()
            self._lock_loop = loop
        return self._lock

    @property
    def is_live(self) -> bool:
        return self.mode == LIVE

    async def send_message(self, message: str, *, timeout_s: Optional[float] = None) -> AssistantResponse:
        if self.mode == DEMO:
            return AssistantResponse(text=messages.DEMO_CHAT[self.language], sources=[])
        if self._chat is None:
            return AssistantResponse(text=messages.TECHNICAL_DIFFICULTIES[self.language], sources=[])

        timeout = timeout_s if timeout_s is not None else self._llm.timeout_s
        async with self._send_lock():
            try:
                response = await asyncio.wait_for(self._client.send(self._chat, message), timeout=timeout)
            except Exception as exc:
                # provider history is left as the provider keeps it
                logger.exception(
                    "Gemini chat send failed",
                    extra={"language": self.language.value, "model": self._llm.chat_model, "error_type": type(exc).__name__},
                )
                return AssistantResponse(text=messages.TECHNICAL_DIFFICULTIES[self.language], sources=[])

        return AssistantResponse(text=extract_text(response) or "", sources=extract_sources(response))


def create_session(
    language: Language | str,
    history: Optional[Iterable[ChatMessage]] = None,
    **deps,
) -> LegalChatSession:
    return LegalChatSession(language, history, **deps)


async def send_message(session: LegalChatSession, message: str, *, timeout_s: Optional[float] = None) -> AssistantResponse:
    return await session.send_message(message, timeout_s=timeout_s)


__all__ = ["LegalChatSession", "create_session", "send_message", "DEMO", "LIVE"]
