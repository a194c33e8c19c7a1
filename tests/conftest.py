import pytest


@pytest.fixture(autouse=True)
def _offline(monkeypatch):
    # Never reach the network from tests; individual tests opt back in.
    monkeypatch.setenv("OFFLINE_MODE", "true")
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
