"""Domain models for the assistant."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import List


class Language(str, Enum):
    EN = "en"
    AR = "ar"

    @classmethod
    def parse(cls, value: "Language | str") -> "Language":
        if isinstance(value, Language):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"Unsupported language: {value!r} (expected 'en' or 'ar')") from None

    @property
    def is_rtl(self) -> bool:
        return self is Language.AR


class Role(str, Enum):
    USER = "user"
    MODEL = "model"


@dataclass(frozen=True)
class Source:
    title: str
    uri: str

    def __post_init__(self) -> None:
        if not isinstance(self.title, str) or not self.title.strip():
            raise ValueError("Source.title must be a non-empty string")
        if not isinstance(self.uri, str) or not self.uri.strip():
            raise ValueError("Source.uri must be a non-empty string")


@dataclass
class AssistantResponse:
    text: str
    sources: List[Source] = field(default_factory=list)

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class ChatMessage:
    role: Role
    text: str
    sources: List[Source] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.role = Role(self.role)

    @classmethod
    def from_response(cls, response: AssistantResponse) -> "ChatMessage":
        return cls(role=Role.MODEL, text=response.text, sources=list(response.sources))


__all__ = ["Language", "Role", "Source", "AssistantResponse", "ChatMessage"]
