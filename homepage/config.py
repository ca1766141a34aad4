"""Application configuration using Pydantic Settings."""

import os
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    TomlConfigSettingsSource,
)

ENV_PREFIX = "APPCFG_"
SYSTEM_CONFIG_DIR = Path("/etc/homepage/config")
LOCAL_CONFIG_DIR = Path("./config")
PACKAGE_DIR = Path(__file__).resolve().parent


def resolve_config_dir() -> Path:
    """Pick the directory holding `*.toml` config files.

    `APPCFG_CONFIG_DIR` wins; otherwise the system directory is used when it
    exists and `./config` when it does not.
    """
    override = os.environ.get(f"{ENV_PREFIX}CONFIG_DIR")
    if override:
        return Path(override)
    if SYSTEM_CONFIG_DIR.is_dir():
        return SYSTEM_CONFIG_DIR
    return LOCAL_CONFIG_DIR


def config_files(config_dir: Path) -> list[Path]:
    if not config_dir.is_dir():
        return []
    return sorted(config_dir.glob("*.toml"))


class SlackSettings(BaseModel):
    """Incoming-webhook target for contact form messages (`slack.webhook`)."""

    webhook: str
    timeout_seconds: float = Field(default=5.0)


class Settings(BaseSettings):
    """Application settings loaded from environment variables and TOML files."""

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    environment: Literal["development", "test", "production"] = Field(default="development")

    # Server
    host: str = Field(default="::")
    port: int = Field(default=8080)

    # Filesystem
    static_dir: Path = Field(default=PACKAGE_DIR / "static")
    templates_dir: Path = Field(default=PACKAGE_DIR / "templates")

    # Contact form relay
    slack: SlackSettings

    # API Settings
    cors_origins: list[str] = Field(default=["http://localhost:8080"])

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(default="INFO")
    log_format: Literal["json", "text"] = Field(default="json")

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        toml_settings = TomlConfigSettingsSource(
            settings_cls,
            toml_file=config_files(resolve_config_dir()),
        )
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            toml_settings,
            file_secret_settings,
        )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
