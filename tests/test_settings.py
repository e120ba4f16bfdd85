"""설정 테스트"""

from unittest.mock import patch

import pytest

from labchart.settings import Settings, validate_settings

_ENV_KEYS = [
    "OCR_PROVIDER",
    "LLM_PROVIDER",
    "ANTHROPIC_API_KEY",
    "OPENAI_API_KEY",
    "ANTHROPIC_MODEL",
    "LLM_MAX_TOKENS",
    "SUMMARY_MAX_CHARS",
    "GOOGLE_APPLICATION_CREDENTIALS",
]


@pytest.fixture
def clean_env(monkeypatch):
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


class TestSettings:
    """Settings 기본값/환경변수 테스트"""

    def test_defaults(self, clean_env):
        s = Settings(_env_file=None)
        assert s.ocr_provider == "google"
        assert s.llm_provider == "anthropic"
        assert s.anthropic_model == "claude-sonnet-4-20250514"
        assert s.llm_max_tokens == 4096
        assert s.summary_max_chars == 50000

    def test_env_override(self, clean_env):
        clean_env.setenv("SUMMARY_MAX_CHARS", "100")
        clean_env.setenv("LLM_PROVIDER", "dummy")
        s = Settings(_env_file=None)
        assert s.summary_max_chars == 100
        assert s.llm_provider == "dummy"

    def test_invalid_provider(self, clean_env):
        clean_env.setenv("OCR_PROVIDER", "paddle")
        with pytest.raises(ValueError):
            Settings(_env_file=None)


class TestValidateSettings:
    """validate_settings() 경고 테스트"""

    def test_missing_keys(self, clean_env):
        with patch("labchart.settings.settings", Settings(_env_file=None)):
            warnings = validate_settings()
        assert "ocr" in warnings
        assert "ANTHROPIC_API_KEY" in warnings["llm"]

    def test_dummy_providers(self, clean_env):
        clean_env.setenv("OCR_PROVIDER", "dummy")
        clean_env.setenv("LLM_PROVIDER", "dummy")
        with patch("labchart.settings.settings", Settings(_env_file=None)):
            assert validate_settings() == {}
