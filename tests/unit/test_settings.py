"""
Unit tests for lifeskills_app/utils/settings.py and logging_config.py.
"""

import logging
from pathlib import Path

from lifeskills_app.utils.logging_config import configure_logging
from lifeskills_app.utils.settings import load_settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("SHEET_URL", "REQUEST_TIMEOUT_SECONDS", "USE_LOCAL_SHEET_SERVER", "CACHE_PATH"):
            monkeypatch.delenv(f"LIFESKILLS_{name}", raising=False)

        settings = load_settings()

        assert settings.sheet_url == ""
        assert settings.request_timeout_seconds is None
        assert settings.cache_path.name == "lifeSkillsEvaluations.json"
        assert not settings.use_local_sheet_server

    def test_environment_overrides(self, monkeypatch, tmp_path):
        monkeypatch.setenv("LIFESKILLS_SHEET_URL", "https://script.google.com/macros/s/x/exec")
        monkeypatch.setenv("LIFESKILLS_REQUEST_TIMEOUT_SECONDS", "7.5")
        monkeypatch.setenv("LIFESKILLS_CACHE_PATH", str(tmp_path / "cache.json"))
        monkeypatch.setenv("LIFESKILLS_LOCAL_SHEET_SERVER_PORT", "9000")

        settings = load_settings()

        assert settings.sheet_url.endswith("/exec")
        assert settings.request_timeout_seconds == 7.5
        assert settings.cache_path == Path(tmp_path / "cache.json")
        assert settings.local_sheet_server_url == "http://127.0.0.1:9000/"


class TestConfigureLogging:
    def test_returns_package_logger(self):
        logger = configure_logging(logging.DEBUG)
        assert logger.name == "lifeskills_app"
