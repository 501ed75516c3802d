"""Extract web citations from provider grounding metadata."""

from __future__ import annotations

from typing import Any, Iterable, List, Optional

from lexcora_assistant.domain.models import Source


def _field(obj: Any, *names: str) -> Any:
    """Read the first present field from an SDK object or a plain dict; None if absent."""
    if obj is None:
        return None
    for name in names:
        if isinstance(obj, dict):
            value = obj.get(name)
        else:
            value = getattr(obj, name, None)
        if value is not None:
            return value
    return None


def _first(items: Any) -> Any:
    if isinstance(items, (list, tuple)) and items:
        return items[0]
    return None


def _as_list(items: Any) -> List[Any]:
    if isinstance(items, (list, tuple)):
        return list(items)
    return []


def _grounding_chunks(response: Any) -> List[Any]:
    candidate = _first(_field(response, "candidates"))
    metadata = _field(candidate, "grounding_metadata", "groundingMetadata")
    return _as_list(_field(metadata, "grounding_chunks", "groundingChunks"))


def _clean(value: Any) -> Optional[str]:
    if isinstance(value, str) and value.strip():
        return value
    return None


def _to_sources(webs: Iterable[Any]) -> List[Source]:
    sources: List[Source] = []
    for web in webs:
        uri = _clean(_field(web, "uri"))
        title = _clean(_field(web, "title"))
        if uri and title:
            sources.append(Source(title=title, uri=uri))
    return sources


def extract_text(response: Any) -> Optional[str]:
    """Return the reply text, or None when the provider produced none."""
    try:
        text = _field(response, "text")
    except ValueError:
        # some SDK versions raise when there is no text part
        return None
    return text if isinstance(text, str) and text else None


def extract_sources(response: Any) -> List[Source]:
    """Return the response's web citations in provider order.

    Every level of the metadata may be missing; that yields an empty list.
    Duplicates are passed through.
    """
    return _to_sources(_field(chunk, "web") for chunk in _grounding_chunks(response))


__all__ = ["extract_sources", "extract_text"]
