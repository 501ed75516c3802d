"""Configuration loader for the LexCora assistant."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

from lexcora_assistant.domain.errors import ConfigError

SUPPORTED_PROVIDERS = {"gemini"}


class AppConfig(BaseModel):
    name: str = Field(default="lexcora-assistant")
    environment: str = Field(default="development")


class LoggingConfig(BaseModel):
    level: str = Field(default="INFO")


class LLMConfig(BaseModel):
    provider: str = Field(default="gemini")
    model: str = Field(default="gemini-2.5-flash")
    chat_model: str = Field(default="gemini-3-pro-preview")
    timeout_s: float = Field(default=60.0, gt=0)
    api_key_env: list[str] = Field(default_factory=lambda: ["API_KEY", "GEMINI_API_KEY", "GOOGLE_API_KEY"])

    @field_validator("provider")
    @classmethod
    def _known_provider(cls, value: str) -> str:
        provider = value.strip().lower()
        if provider not in SUPPORTED_PROVIDERS:
            raise ValueError(f"Unsupported LLM provider: {value}")
        return provider


class Settings(BaseModel):
    app: AppConfig = Field(default_factory=AppConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    llm: LLMConfig = Field(default_factory=LLMConfig)


DEFAULT_CONFIG_PATH = Path("config/default.yaml")


def _load_yaml(path: Path) -> dict:
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")
    try:
        with path.open("r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc


def _apply_env_overrides(data: dict) -> dict:
    overrides = {
        ("app", "environment"): os.getenv("APP_ENV"),
        ("logging", "level"): os.getenv("LOG_LEVEL"),
        ("llm", "provider"): os.getenv("LLM_PROVIDER"),
        ("llm", "model"): os.getenv("LLM_MODEL"),
        ("llm", "chat_model"): os.getenv("LLM_CHAT_MODEL"),
        ("llm", "timeout_s"): os.getenv("LLM_TIMEOUT_S"),
    }
    for (section, key), value in overrides.items():
        if value is None:
            continue
        if section not in data or data[section] is None:
            data[section] = {}
        if key == "timeout_s":
            try:
                data[section][key] = float(value)
                continue
            except ValueError:
                # let pydantic report the bad value
                pass
        data[section][key] = value
    return data


def load_config(path: Optional[Path] = None) -> Settings:
    """Load configuration from YAML and environment variables."""
    load_dotenv()
    config_path = path or DEFAULT_CONFIG_PATH
    raw = _load_yaml(config_path)
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file {config_path} must contain a mapping")
    merged = _apply_env_overrides(raw)
    try:
        return Settings(**merged)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration in {config_path}: {exc}") from exc


__all__ = [
    "Settings",
    "AppConfig",
    "LoggingConfig",
    "LLMConfig",
    "load_config",
    "DEFAULT_CONFIG_PATH",
]
