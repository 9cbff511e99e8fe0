"""Tests for library settings."""

import pytest
from pydantic import ValidationError

from taxpayer_id.config import TinSettings, get_settings


class TestTinSettings:
    """Test TinSettings."""

    def test_defaults(self, monkeypatch):
        """Test default values."""
        monkeypatch.delenv("TIN_MASK_CHAR", raising=False)
        monkeypatch.delenv("TIN_LOG_REJECTIONS", raising=False)
        settings = TinSettings()
        assert settings.mask_char == "X"
        assert settings.log_rejections is True

    def test_env_prefix(self, monkeypatch):
        """Test TIN_ environment variables are read."""
        monkeypatch.setenv("TIN_MASK_CHAR", "#")
        monkeypatch.setenv("TIN_LOG_REJECTIONS", "false")
        settings = TinSettings()
        assert settings.mask_char == "#"
        assert settings.log_rejections is False

    @pytest.mark.parametrize("value", ["", "XX", "7"])
    def test_mask_char_validated(self, value):
        """Test mask_char must be one non-digit character."""
        with pytest.raises(ValidationError):
            TinSettings(mask_char=value)

    def test_get_settings_cached(self):
        """Test settings instance is cached."""
        get_settings.cache_clear()
        assert get_settings() is get_settings()
        get_settings.cache_clear()
