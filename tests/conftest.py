import pytest


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep the diagnostic log level from the developer's shell out of tests."""
    monkeypatch.delenv("TEXTECHO_LOG_LEVEL", raising=False)
