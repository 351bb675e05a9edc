import logging

import pytest

from resume_review.config import Settings
from resume_review.services import gemini


@pytest.fixture
def fresh_client_cache(monkeypatch):
    monkeypatch.setattr(gemini, "_genai_client", None)
    monkeypatch.setattr(gemini, "_genai_client_checked", False)


def test_missing_api_key_is_reported_once(monkeypatch, caplog, fresh_client_cache):
    monkeypatch.setattr(gemini, "get_settings", lambda: Settings(gemini_api_key=""))

    with caplog.at_level(logging.WARNING, logger=gemini.__name__):
        assert gemini.get_genai_client() is None
        assert gemini.get_genai_client() is None

    warnings = [r for r in caplog.records if "GEMINI_API_KEY not set" in r.getMessage()]
    assert len(warnings) == 1


def test_client_is_built_once(monkeypatch, fresh_client_cache):
    built = []

    def fake_build(settings):
        built.append(settings)
        return object()

    monkeypatch.setattr(gemini, "build_genai_client", fake_build)

    first = gemini.get_genai_client()
    second = gemini.get_genai_client()

    assert first is second
    assert len(built) == 1
