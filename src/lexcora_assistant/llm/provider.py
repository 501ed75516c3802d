"""LLM provider dispatcher."""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from lexcora_assistant.config import LLMConfig
from lexcora_assistant.llm.gemini_client import GeminiClient
from lexcora_assistant.services.credentials import CredentialGate


@lru_cache(maxsize=4)
def _gemini_client(api_key: str) -> GeminiClient:
    return GeminiClient(api_key=api_key)


def get_client(gate: CredentialGate, config=None) -> Optional[GeminiClient]:
    """Return the provider client, or None when no credential is configured.

    The provider name is validated when settings load (``LLMConfig``).
    """
    if not gate.available():
        return None
    return _gemini_client(gate.api_key)


def llm_settings(config=None) -> LLMConfig:
    return getattr(config, "llm", None) or LLMConfig()


__all__ = ["get_client", "llm_settings"]
