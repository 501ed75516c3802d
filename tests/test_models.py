import pytest

from lexcora_assistant.domain.models import AssistantResponse, ChatMessage, Language, Role, Source


def test_language_parse():
    assert Language.parse("EN") is Language.EN
    assert Language.parse(Language.AR) is Language.AR
    assert Language.AR.is_rtl and not Language.EN.is_rtl
    with pytest.raises(ValueError):
        Language.parse("fr")


@pytest.mark.parametrize("title,uri", [("", "https://a"), ("A", ""), ("  ", "https://a"), (None, "https://a")])
def test_source_requires_both_fields(title, uri):
    with pytest.raises(ValueError):
        Source(title=title, uri=uri)


def test_response_sources_default_empty():
    resp = AssistantResponse(text="hi")
    assert resp.sources == []
    assert resp.to_dict() == {"text": "hi", "sources": []}


def test_chat_message_from_response():
    src = Source(title="Law", uri="https://uaelegislation.gov.ae/en/law")
    msg = ChatMessage.from_response(AssistantResponse(text="answer", sources=[src]))
    assert msg.role is Role.MODEL
    assert msg.sources == [src]
    assert ChatMessage(role="user", text="q").role is Role.USER
