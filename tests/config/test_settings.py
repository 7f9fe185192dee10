"""Tests for dicer/config: settings and logging setup."""

import logging

import pytest
from pydantic import ValidationError

from dicer.config.log_setup import configure_logging
from dicer.config.settings import Settings, get_settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("MAX_LIVES", "NUM_AILMENTS", "NUM_DICE", "PHASE_STACK_CAPACITY", "DEBUG", "LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)
        settings = Settings(_env_file=None)
        assert settings.max_lives == 3
        assert settings.num_ailments == 9
        assert settings.num_dice == 3
        assert settings.phase_stack_capacity == 20
        assert settings.debug is False
        assert settings.log_level == "INFO"

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("MAX_LIVES", "5")
        monkeypatch.setenv("NUM_DICE", "4")
        settings = Settings(_env_file=None)
        assert settings.max_lives == 5
        assert settings.num_dice == 4

    @pytest.mark.parametrize("field, value", [
        ("max_lives", 0),
        ("num_ailments", 0),
        ("num_dice", 0),
        ("num_dice", 11),
        ("phase_stack_capacity", 4),
    ])
    def test_bounds(self, field, value):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, **{field: value})

    def test_get_settings_is_cached(self):
        get_settings.cache_clear()
        try:
            assert get_settings() is get_settings()
        finally:
            get_settings.cache_clear()


class TestConfigureLogging:
    def test_uses_log_level(self, settings):
        level = configure_logging(settings.model_copy(update={"log_level": "warning"}))
        assert level == logging.WARNING
        assert logging.getLogger().level == logging.WARNING

    def test_debug_overrides_level(self, settings):
        level = configure_logging(settings.model_copy(update={"debug": True}))
        assert level == logging.DEBUG

    def test_unknown_level_falls_back_to_info(self, settings):
        level = configure_logging(settings.model_copy(update={"log_level": "chatty"}))
        assert level == logging.INFO
