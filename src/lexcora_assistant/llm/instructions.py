"""System instruction composer: official-source whitelist, retrieval rules, tone and disclaimer."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import List
from urllib.parse import urlparse

from jinja2 import StrictUndefined, Template

from lexcora_assistant.domain.models import Language, Source

OFFICIAL_SOURCES: tuple[Source, ...] = (
    Source(title="UAE Legislation (English)", uri="https://uaelegislation.gov.ae/en"),
    Source(title="UAE Legislation (Arabic)", uri="https://uaelegislation.gov.ae/ar"),
    Source(
        title="Ministry of Justice - Laws & Legislation",
        uri="https://www.moj.gov.ae/ar/about-moj/judicial-training-institute/laws-and-legislation.aspx",
    ),
    Source(
        title="Ministry of Justice - Studies & Researches",
        uri="https://www.moj.gov.ae/ar/media-center/judicial-studies-magazine/studies-and-researches.aspx#page=1",
    ),
    Source(
        title="Abu Dhabi Judicial Department - Judgements",
        uri="https://www.adjd.gov.ae/sites/eServices/AR/Pages/Judgements.aspx",
    ),
)

DISCLAIMERS = {
    Language.EN: "Disclaimer: This information is for educational purposes only and does not constitute legal advice.",
    Language.AR: "تنويه: هذه المعلومات للأغراض التعليمية فقط ولا تشكل مشورة قانونية.",
}

_LANGUAGE_NAMES = {Language.EN: "English", Language.AR: "Arabic"}

ANSWER_MAX_WORDS = 100

VARIANTS = ("answer", "chat")


def _load_template() -> str:
    prompt_path = Path(__file__).resolve().parent / "prompts" / "system_instruction.md"
    return prompt_path.read_text(encoding="utf-8")


@lru_cache(maxsize=1)
def _template() -> Template:
    return Template(_load_template(), undefined=StrictUndefined, keep_trailing_newline=True)


def _language_directive(language: Language, variant: str) -> str:
    name = _LANGUAGE_NAMES[language]
    disclaimer = DISCLAIMERS[language]
    if variant == "chat":
        return (
            f"Answer in {name}. Be concise, professional, and use a tone suitable for high-net-worth legal "
            "professionals. You MUST always conclude your response with a clear disclaimer that this information "
            f"is not legal advice, using this exact wording: '{disclaimer}'"
        )
    return (
        f"Answer in {name}. Keep it professional, authoritative, and under {ANSWER_MAX_WORDS} words. "
        f"You MUST append this exact disclaimer at the end: '{disclaimer}'"
    )


def compose(language: Language | str, variant: str = "answer") -> str:
    """Build the system instruction for a single-shot answer or a chat session.

    The text is, in order: the official source whitelist with the search
    restriction rules, the citation rule, the language/tone/length directive
    and the language-matched disclaimer the model must reproduce.
    """
    lang = Language.parse(language)
    if variant not in VARIANTS:
        raise ValueError(f"Unknown instruction variant: {variant!r}")
    return _template().render(
        sources=OFFICIAL_SOURCES,
        language_directive=_language_directive(lang, variant),
    )


def compose_chat(language: Language | str) -> str:
    return compose(language, variant="chat")


def allowed_domains() -> List[str]:
    domains: List[str] = []
    for source in OFFICIAL_SOURCES:
        host = urlparse(source.uri).netloc.lower()
        if host and host not in domains:
            domains.append(host)
    return domains


__all__ = ["OFFICIAL_SOURCES", "DISCLAIMERS", "ANSWER_MAX_WORDS", "compose", "compose_chat", "allowed_domains"]
