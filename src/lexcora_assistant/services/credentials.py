"""Process-wide model credential check."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Iterable, Optional

from lexcora_assistant.config import LLMConfig


@dataclass(frozen=True)
class CredentialGate:
    api_key: str = field(default="", repr=False)
    env_var: Optional[str] = None

    def available(self) -> bool:
        return bool(self.api_key.strip())


def gate_from_env(names: Iterable[str]) -> CredentialGate:
    for name in names:
        value = os.getenv(name)
        if value and value.strip():
            return CredentialGate(api_key=value.strip(), env_var=name)
    return CredentialGate()


@lru_cache(maxsize=1)
def _cached_gate(names: tuple[str, ...]) -> CredentialGate:
    return gate_from_env(names)


def load_gate(config=None) -> CredentialGate:
    """Read the credential once per process; later calls return the same gate."""
    llm_cfg = getattr(config, "llm", None) or LLMConfig()
    return _cached_gate(tuple(llm_cfg.api_key_env))


def reset_gate_cache() -> None:
    _cached_gate.cache_clear()


__all__ = ["CredentialGate", "gate_from_env", "load_gate", "reset_gate_cache"]
