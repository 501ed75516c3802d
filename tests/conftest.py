import pytest

from lexcora_assistant.services.credentials import reset_gate_cache


@pytest.fixture(autouse=True)
def _fresh_gate():
    reset_gate_cache()
    yield
    reset_gate_cache()
