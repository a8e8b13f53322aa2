"""Configuration for plugsmith.

Values come from ``PLUGSMITH_*`` environment variables or a ``.env`` file in
the working directory. CLI flags take precedence over both.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """plugsmith settings with env and .env support."""

    model_config = SettingsConfigDict(env_prefix="PLUGSMITH_", env_file=".env", extra="ignore")

    interactive: bool = Field(
        default=True, description="Prompt for a plugin name when none is given"
    )
    npm_command: str = Field(default="npm", description="Package manager used for linking")
    templates_dir: Path | None = Field(
        default=None, description="Directory holding package.json, index.js and README.md"
    )
    log_level: str = Field(default="INFO", description="Log level for the plugsmith logger")


@lru_cache
def get_settings(force_reload: bool = False) -> Settings:
    """Get cached settings instance."""
    if force_reload:
        get_settings.cache_clear()
    return Settings()
