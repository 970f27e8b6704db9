"""Configuration settings for prodbuild.

Uses pydantic-settings for config parsing from environment variables
and defaults. Configuration precedence: env vars > .env file > defaults.
"""

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings.

    Settings are loaded from environment variables with the PRODBUILD_ prefix.
    """

    model_config = SettingsConfigDict(
        env_prefix="PRODBUILD_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Paths
    project_root: Path = Field(
        default_factory=Path.cwd,
        description="Project root where sub-builds run and the manifest lives",
    )
    dist_dir_name: str = Field(
        default="dist",
        min_length=1,
        description="Name of the output directory under the project root",
    )
    manifest_name: str = Field(
        default="package.json",
        min_length=1,
        description="Manifest file copied into the output directory",
    )
    launcher_name: str = Field(
        default="start.js",
        min_length=1,
        description="Name of the generated launcher script",
    )

    # Sub-builds
    client_command: str = Field(
        default="npm run build:client",
        min_length=1,
        description="Command that builds the client",
    )
    server_command: str = Field(
        default="npm run build:server",
        min_length=1,
        description="Command that builds the server",
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )

    @property
    def dist_dir(self) -> Path:
        """Output directory path."""
        return self.project_root / self.dist_dir_name

    @property
    def manifest_path(self) -> Path:
        """Source manifest path."""
        return self.project_root / self.manifest_name


def get_settings() -> Settings:
    """Get the application settings.

    Returns:
        Settings instance loaded from environment.
    """
    return Settings()


def print_settings_json(settings: Settings | None = None) -> str:
    """Render effective settings as JSON.

    Args:
        settings: Optional settings instance; uses default if not provided.

    Returns:
        JSON string of effective settings.
    """
    if settings is None:
        settings = get_settings()
    return settings.model_dump_json(indent=2)


__all__ = ["Settings", "get_settings", "print_settings_json"]
