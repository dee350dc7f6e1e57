"""
Tests for settings and logging configuration.
"""

import logging

import pytest
from pydantic import ValidationError as SettingsValidationError

from booksystem import config
from booksystem.config import DEFAULT_LOG_FORMAT, Settings, get_settings, reset_settings
from booksystem.logging_config import configure_logging


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Clear BOOKSYSTEM_* variables and the cached settings around each test."""
    monkeypatch.delenv("BOOKSYSTEM_LOG_LEVEL", raising=False)
    monkeypatch.delenv("BOOKSYSTEM_LOG_FORMAT", raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def restore_root_logger():
    """Put the root logger's handlers and level back after the test."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    for handler in root.handlers[:]:
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


class TestSettings:
    """Tests for the Settings model."""

    def test_defaults(self):
        settings = Settings()

        assert settings.log_level == "INFO"
        assert settings.log_format == DEFAULT_LOG_FORMAT

    def test_level_is_normalized(self):
        assert Settings(log_level=" debug ").log_level == "DEBUG"

    def test_invalid_level_rejected(self):
        with pytest.raises(SettingsValidationError):
            Settings(log_level="LOUD")

    def test_empty_format_rejected(self):
        with pytest.raises(SettingsValidationError):
            Settings(log_format="")

    def test_from_env(self, monkeypatch):
        """Test reading settings from environment variables."""
        monkeypatch.setenv("BOOKSYSTEM_LOG_LEVEL", "warning")
        monkeypatch.setenv("BOOKSYSTEM_LOG_FORMAT", "%(levelname)s %(message)s")

        settings = Settings.from_env()

        assert settings.log_level == "WARNING"
        assert settings.log_format == "%(levelname)s %(message)s"

    def test_from_env_uses_defaults_when_unset(self):
        assert Settings.from_env() == Settings()

    def test_from_env_invalid_value(self, monkeypatch):
        monkeypatch.setenv("BOOKSYSTEM_LOG_LEVEL", "verbose")

        with pytest.raises(SettingsValidationError):
            Settings.from_env()


class TestGetSettings:
    """Tests for the settings singleton."""

    def test_returns_same_instance(self):
        assert get_settings() is get_settings()

    def test_reset_rereads_environment(self, monkeypatch):
        assert get_settings().log_level == "INFO"

        monkeypatch.setenv("BOOKSYSTEM_LOG_LEVEL", "ERROR")
        reset_settings()

        assert get_settings().log_level == "ERROR"
        assert config._settings is not None


class TestConfigureLogging:
    """Tests for configure_logging()."""

    def test_applies_explicit_settings(self, restore_root_logger):
        configure_logging(Settings(log_level="WARNING"))

        assert restore_root_logger.level == logging.WARNING

    def test_defaults_to_environment(self, monkeypatch, restore_root_logger):
        monkeypatch.setenv("BOOKSYSTEM_LOG_LEVEL", "DEBUG")

        configure_logging()

        assert restore_root_logger.level == logging.DEBUG

    def test_installs_formatter(self, restore_root_logger):
        configure_logging(Settings(log_format="%(levelname)s|%(message)s"))

        formats = [handler.formatter._fmt for handler in restore_root_logger.handlers if handler.formatter]
        assert "%(levelname)s|%(message)s" in formats
