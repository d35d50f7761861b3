"""Tests for configuration management."""

import json
import logging
from pathlib import Path

from jobhub.config import AppearanceConfig, Settings, settings
from jobhub.log import get_logger


class TestAppearanceConfig:
    """Tests for appearance configuration."""

    def test_defaults(self):
        """Test appearance config with default values."""
        config = AppearanceConfig()
        assert config.accent_color == "#007AFF"
        assert config.color_scheme == "system"
        assert config.status_color("interviewing") == "orange"

    def test_from_file(self, tmp_path):
        """Test loading appearance config from file."""
        path = tmp_path / "appearance.json"
        path.write_text(json.dumps({"accent_color": "#FF9500", "color_scheme": "dark"}))

        config = AppearanceConfig.from_file(str(path))
        assert config.accent_color == "#FF9500"
        assert config.color_scheme == "dark"

    def test_from_missing_file(self, tmp_path):
        """A missing file gives the defaults."""
        config = AppearanceConfig.from_file(str(tmp_path / "nope.json"))
        assert config == AppearanceConfig()

    def test_unknown_status_color(self):
        """Unknown statuses fall back to gray."""
        assert AppearanceConfig().status_color("ghosted") == "gray"

    def test_custom_status_colors(self):
        """Status colors can be overridden."""
        config = AppearanceConfig(status_colors={"offer": "gold"})
        assert config.status_color("offer") == "gold"


class TestSettings:
    """Tests for application settings."""

    def test_database_url_derived_from_data_root(self, monkeypatch, tmp_path):
        """database_url defaults to a SQLite file inside data_root."""
        monkeypatch.setenv("DATA_ROOT", str(tmp_path))
        monkeypatch.delenv("DATABASE_URL", raising=False)

        settings = Settings()
        assert settings.data_root == str(tmp_path.resolve())
        assert settings.database_url == f"sqlite:///{tmp_path.resolve()}/jobhub.db"

    def test_data_root_expands_home(self, monkeypatch):
        """A leading ~ is expanded."""
        monkeypatch.setenv("DATA_ROOT", "~/jobhub-data")
        settings = Settings()
        assert settings.data_root == str(Path("~/jobhub-data").expanduser().resolve())

    def test_settings_from_env(self, monkeypatch):
        """Test loading settings from environment variables."""
        monkeypatch.setenv("DATABASE_URL", "sqlite:///./test.db")
        monkeypatch.setenv("BACKEND_HOST", "127.0.0.1")
        monkeypatch.setenv("BACKEND_PORT", "9000")
        monkeypatch.setenv("FRONTEND_URL", "http://localhost:5173")
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")

        settings = Settings()
        assert settings.database_url == "sqlite:///./test.db"
        assert settings.backend_host == "127.0.0.1"
        assert settings.backend_port == 9000
        assert settings.frontend_url == "http://localhost:5173"
        assert settings.log_level == "DEBUG"


class TestLogging:
    """Tests for the package logger helper."""

    def test_handler_attached_once(self):
        """Repeated calls share one handler on the package logger."""
        first = get_logger("jobhub.services.repository")
        get_logger("jobhub.routers.jobs")
        package_logger = logging.getLogger("jobhub")

        assert first.name == "jobhub.services.repository"
        assert len(package_logger.handlers) == 1
        assert package_logger.level == logging.getLevelName(settings.log_level.upper())
