from types import SimpleNamespace

from lexcora_assistant.services.credentials import CredentialGate, gate_from_env, load_gate


def _clear(monkeypatch):
    for name in ("API_KEY", "GEMINI_API_KEY", "GOOGLE_API_KEY"):
        monkeypatch.delenv(name, raising=False)


def test_gate_availability():
    assert CredentialGate(api_key="k").available() is True
    assert CredentialGate(api_key="   ").available() is False
    assert CredentialGate().available() is False
    assert "sk-secret" not in repr(CredentialGate(api_key="sk-secret"))


def test_gate_from_env_first_non_blank(monkeypatch):
    _clear(monkeypatch)
    monkeypatch.setenv("API_KEY", " ")
    monkeypatch.setenv("GEMINI_API_KEY", "secret")
    gate = gate_from_env(["API_KEY", "GEMINI_API_KEY"])
    assert gate.available()
    assert gate.env_var == "GEMINI_API_KEY"


def test_load_gate_is_read_once(monkeypatch):
    _clear(monkeypatch)
    first = load_gate()
    assert first.available() is False
    monkeypatch.setenv("API_KEY", "late-key")
    assert load_gate() is first
    assert load_gate().available() is False


def test_load_gate_uses_configured_names(monkeypatch):
    _clear(monkeypatch)
    monkeypatch.setenv("LEXCORA_KEY", "abc")
    cfg = SimpleNamespace(llm=SimpleNamespace(api_key_env=["LEXCORA_KEY"]))
    assert load_gate(cfg).available() is True
