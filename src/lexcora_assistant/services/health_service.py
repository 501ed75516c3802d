"""Offline health checks for the assistant setup."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from lexcora_assistant.domain.models import Language
from lexcora_assistant.llm.instructions import DISCLAIMERS, VARIANTS, allowed_domains, compose
from lexcora_assistant.llm.provider import llm_settings
from lexcora_assistant.services.credentials import CredentialGate, load_gate


@dataclass
class HealthResult:
    ok: bool
    detail: dict

    def to_dict(self) -> dict:
        return {"ok": self.ok, **self.detail}


def check_credentials(gate: CredentialGate) -> dict:
    # demo mode is a valid state, so a missing key is reported, not failed
    if gate.available():
        return HealthResult(ok=True, detail={"mode": "live", "env_var": gate.env_var}).to_dict()
    return HealthResult(ok=True, detail={"mode": "demo", "env_var": None}).to_dict()


def check_instructions() -> dict:
    missing = []
    try:
        for lang in Language:
            for variant in VARIANTS:
                text = compose(lang, variant=variant)
                if DISCLAIMERS[lang] not in text:
                    missing.append(f"{lang.value}/{variant}")
    except Exception as exc:
        return HealthResult(ok=False, detail={"error": f"instruction render failed: {exc}"}).to_dict()
    return HealthResult(ok=not missing, detail={"missing_disclaimer": missing, "domains": allowed_domains()}).to_dict()


def check_provider_config(cfg) -> dict:
    llm_cfg = llm_settings(cfg)
    detail = {
        "provider": llm_cfg.provider,
        "model": llm_cfg.model,
        "chat_model": llm_cfg.chat_model,
        "timeout_s": llm_cfg.timeout_s,
    }
    if not llm_cfg.model or not llm_cfg.chat_model:
        detail["error"] = "model identifiers must be set"
        return HealthResult(ok=False, detail=detail).to_dict()
    return HealthResult(ok=True, detail=detail).to_dict()


def run_all_checks(cfg, *, gate: Optional[CredentialGate] = None) -> dict:
    return {
        "credentials": check_credentials(gate or load_gate(cfg)),
        "instructions": check_instructions(),
        "provider": check_provider_config(cfg),
    }


__all__ = ["check_credentials", "check_instructions", "check_provider_config", "run_all_checks"]
