"""Single-shot legal answers grounded on official sources."""

from __future__ import annotations

import asyncio
from typing import Optional

from lexcora_assistant.domain import messages
from lexcora_assistant.domain.models import AssistantResponse, Language
from lexcora_assistant.llm.citations import extract_sources, extract_text
from lexcora_assistant.llm.instructions import compose
from lexcora_assistant.llm.provider import get_client, llm_settings
from lexcora_assistant.logging import get_logger
from lexcora_assistant.services.credentials import CredentialGate, load_gate

logger = get_logger(__name__)


async def answer(
    query: str,
    language: Language | str,
    *,
    gate: Optional[CredentialGate] = None,
    client=None,
    config=None,
    timeout_s: Optional[float] = None,
) -> AssistantResponse:
    lang = Language.parse(language)
    gate = gate or load_gate(config)
    if not gate.available():
        logger.info("No model credential; returning demo answer", extra={"language": lang.value})
        return AssistantResponse(text=messages.DEMO_ANSWER[lang], sources=[])

    llm_cfg = llm_settings(config)
    timeout = timeout_s if timeout_s is not None else llm_cfg.timeout_s
    try:
        provider = client or get_client(gate, config)
        response = await asyncio.wait_for(
            provider.generate(model=llm_cfg.model, contents=query, system_instruction=compose(lang)),
            timeout=timeout,
        )
    except Exception as exc:
        logger.exception(
            "Gemini answer failed",
            extra={"language": lang.value, "model": llm_cfg.model, "error_type": type(exc).__name__},
        )
        return AssistantResponse(text=messages.SERVICE_UNAVAILABLE[lang], sources=[])

    text = extract_text(response) or messages.NO_RESPONSE[lang]
    return AssistantResponse(text=text, sources=extract_sources(response))


__all__ = ["answer"]
