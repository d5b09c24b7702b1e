"""Tests for configuration loading."""

import pytest
from formato.config import load_config, DEFAULT_SHEET_WIDTH

ENV_KEYS = ["FORMATO_LOG_LEVEL", "FORMATO_LOG_FILE", "FORMATO_SHEET_TITLE", "FORMATO_SHEET_WIDTH"]


@pytest.fixture
def clean_env(monkeypatch):
    """Unset config variables and restore them after the test."""
    for key in ENV_KEYS:
        # setenv first so monkeypatch also undoes values load_dotenv sets
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)
    return monkeypatch


class TestConfig:
    """Test cases for load_config."""
    
    def test_defaults(self, clean_env, tmp_path):
        """Test defaults with an empty .env file."""
        env_file = tmp_path / ".env"
        env_file.write_text("", encoding="utf-8")
        config = load_config(env_file)
        assert config.log_level == "WARNING"
        assert config.log_file == ""
        assert config.sheet_title == "Despacho"
        assert config.sheet_width == DEFAULT_SHEET_WIDTH
    
    def test_env_file(self, clean_env, tmp_path):
        """Test values read from .env file."""
        env_file = tmp_path / ".env"
        env_file.write_text(
            "FORMATO_LOG_LEVEL=debug\nFORMATO_SHEET_TITLE=Guía\nFORMATO_SHEET_WIDTH=60\n",
            encoding="utf-8",
        )
        config = load_config(env_file)
        assert config.log_level == "DEBUG"
        assert config.sheet_title == "Guía"
        assert config.sheet_width == 60
    
    @pytest.mark.parametrize("raw", ["abc", "0", "-5"])
    def test_invalid_width(self, clean_env, tmp_path, raw):
        """Test bad width falls back to default."""
        clean_env.setenv("FORMATO_SHEET_WIDTH", raw)
        config = load_config(tmp_path / "missing.env")
        assert config.sheet_width == DEFAULT_SHEET_WIDTH
