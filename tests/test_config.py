import pytest

import calmchat.config as config
from calmchat.config import DEFAULT_API_BASE, DEFAULT_MODEL, Settings

ENV_KEYS = ("GEMINI_MODEL", "GEMINI_API_KEY", "GEMINI_BASE", "GEMINI_TIMEOUT", "CORS_ORIGINS", "LOG_LEVEL")


@pytest.fixture
def clean_env(monkeypatch):
    monkeypatch.setattr(config, "load_dotenv", lambda: None)
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


def test_defaults(clean_env):
    s = Settings.from_env()
    assert s.model == DEFAULT_MODEL
    assert s.api_key is None
    assert s.provider_configured is False
    assert s.api_base == DEFAULT_API_BASE
    assert s.timeout == 15.0
    assert s.cors_origins == ["*"]


def test_reads_environment(clean_env):
    clean_env.setenv("GEMINI_MODEL", "gemini-pro")
    clean_env.setenv("GEMINI_API_KEY", "secret")
    clean_env.setenv("GEMINI_TIMEOUT", "3")
    clean_env.setenv("CORS_ORIGINS", "http://a.test, http://b.test")
    clean_env.setenv("LOG_LEVEL", "debug")
    s = Settings.from_env()
    assert s.model == "gemini-pro"
    assert s.provider_configured is True
    assert s.timeout == 3.0
    assert s.cors_origins == ["http://a.test", "http://b.test"]
    assert s.log_level == "DEBUG"


def test_blank_key_counts_as_missing(clean_env):
    clean_env.setenv("GEMINI_API_KEY", "   ")
    assert Settings.from_env().provider_configured is False


def test_endpoint_joins_base_and_model():
    s = Settings(model="m1", api_base="https://example.test/models/")
    assert s.endpoint == "https://example.test/models/m1:generateContent"
