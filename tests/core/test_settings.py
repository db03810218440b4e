"""Tests for environment-driven settings and logger setup."""

import sys

import pytest
from loguru import logger

from session_resolver.config.settings import Settings
from session_resolver.core.logger import setup_logger


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("SESSION_CACHE_TTL_SECONDS", "MUSCLE_SYNC_DEBOUNCE_MS", "MAX_MUSCLE_GROUPS", "LOG_LEVEL", "LOG_FILE", "DEBUG_MAPPING"):
            monkeypatch.delenv(name, raising=False)

        config = Settings(_env_file=None)

        assert config.session_cache_ttl_seconds == 86400
        assert config.muscle_sync_debounce_ms == 150
        assert config.max_muscle_groups == 3
        assert config.log_level == "INFO"
        assert config.log_file is None
        assert config.debug_mapping is False

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("MUSCLE_API_URL", "https://fitness.test/api/")
        monkeypatch.setenv("MUSCLE_SYNC_DEBOUNCE_MS", "300")
        monkeypatch.setenv("DEBUG_MAPPING", "true")

        config = Settings(_env_file=None)

        assert config.muscle_api_url == "https://fitness.test/api"
        assert config.muscle_sync_debounce_ms == 300
        assert config.debug_mapping is True

    def test_invalid_values_fall_back(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "chatty")
        monkeypatch.setenv("MUSCLE_SYNC_DEBOUNCE_MS", "-5")
        monkeypatch.setenv("MAX_MUSCLE_GROUPS", "0")

        config = Settings(_env_file=None)

        assert config.log_level == "INFO"
        assert config.muscle_sync_debounce_ms == 0
        assert config.max_muscle_groups == 3


class TestSetupLogger:
    @pytest.fixture(autouse=True)
    def restore_logger(self):
        yield
        logger.remove()
        logger.add(sys.stderr)

    def test_filters_by_level(self, capsys):
        setup_logger(level="WARNING")
        logger.info("quiet message")
        logger.bind(session_id="s1").warning("loud message")

        err = capsys.readouterr().err

        assert "loud message" in err
        assert "quiet message" not in err

    def test_level_defaults_to_settings(self, capsys, monkeypatch):
        monkeypatch.setattr("session_resolver.core.logger.settings.log_level", "ERROR")

        assert setup_logger() == "ERROR"
        logger.warning("filtered warning")
        logger.error("kept error")

        err = capsys.readouterr().err
        assert "kept error" in err
        assert "filtered warning" not in err

    def test_explicit_level_overrides_settings(self, monkeypatch):
        monkeypatch.setattr("session_resolver.core.logger.settings.log_level", "ERROR")
        assert setup_logger(level="debug") == "DEBUG"

    def test_log_file_from_settings(self, tmp_path, monkeypatch):
        log_path = tmp_path / "logs" / "resolver.log"
        monkeypatch.setattr("session_resolver.core.logger.settings.log_file", str(log_path))

        setup_logger(level="INFO")
        logger.info("written to file")

        assert log_path.parent.is_dir()
        assert "written to file" in log_path.read_text(encoding="utf-8")
