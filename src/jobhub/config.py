"""Configuration management for the application."""

import json
from pathlib import Path
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_STATUS_COLORS: dict[str, str] = {
    "docket": "gray",
    "research": "indigo",
    "applied": "blue",
    "contacted": "teal",
    "interviewing": "orange",
    "offer": "green",
    "rejected": "red",
    "withdrawn": "brown",
}


class AppearanceConfig(BaseSettings):
    """Appearance preferences handed to the presentation layer."""

    accent_color: str = "#007AFF"
    color_scheme: Literal["light", "dark", "system"] = "system"
    status_colors: dict[str, str] = Field(default_factory=lambda: dict(DEFAULT_STATUS_COLORS))

    @classmethod
    def from_file(cls, filepath: str = "config/appearance.json") -> "AppearanceConfig":
        """
        Load appearance configuration from JSON file.

        Missing files fall back to the defaults so a fresh checkout works
        without any config directory.

        Args:
            filepath: Path to the configuration file

        Returns:
            AppearanceConfig instance
        """
        path = Path(filepath)
        if not path.exists():
            return cls()
        with open(path, "r") as f:
            data = json.load(f)
        return cls(**data)

    def status_color(self, status: str) -> str:
        """
        Look up the badge color for a job status.

        Args:
            status: Job status value

        Returns:
            Color name, "gray" for unknown statuses
        """
        return self.status_colors.get(str(status), "gray")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Data root: the SQLite DB and document files live here (outside the repo)
    data_root: str = Field(default="~/Documents/jobhub")

    # Database, auto-derived from data_root if not explicitly set
    database_url: str | None = Field(default=None)

    # Backend Server
    backend_host: str = Field(default="0.0.0.0")
    backend_port: int = Field(default=8000)

    # Frontend
    frontend_url: str = Field(default="http://localhost:3000")

    # Logging
    log_level: str = Field(default="INFO")

    @model_validator(mode="after")
    def derive_paths(self) -> "Settings":
        """Expand data_root and derive database_url if not explicitly set."""
        self.data_root = str(Path(self.data_root).expanduser().resolve())
        if self.database_url is None:
            self.database_url = f"sqlite:///{self.data_root}/jobhub.db"
        return self


# Global settings instance
settings = Settings()

# Load configurations
appearance_config = AppearanceConfig.from_file()
