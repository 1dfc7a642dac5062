"""
Toolhub Configuration Module.

Handles registry defaults and application settings.
Uses pydantic-settings for validation and type safety.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class RegistrySettings(BaseSettings):
    """Defaults for every FunctionHub built from settings."""

    model_config = SettingsConfigDict(env_prefix="TOOLHUB_REGISTRY_")

    separator: str = Field(
        default="_",
        description="Single character joining namespace and function name",
    )
    max_active: int = Field(
        default=10,
        ge=1,
        description="Maximum number of functions active at once in meta mode",
    )
    meta_mode: bool = Field(default=False, description="Start sessions with meta mode enabled")
    namespace_intro: str = Field(
        default="Registered tool namespaces:",
        description="First line of the namespace overview shown to the model",
    )

    @field_validator("separator")
    @classmethod
    def _single_character(cls, value: str) -> str:
        if len(value) != 1:
            raise ValueError("separator must be exactly one character")
        return value

    def to_dict(self) -> dict[str, object]:
        """Return registry settings as dictionary for health endpoint."""
        return {
            "separator": self.separator,
            "max_active": self.max_active,
            "meta_mode": self.meta_mode,
        }


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="TOOLHUB_",
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application
    app_env: Literal["development", "staging", "production"] = "development"
    app_debug: bool = False
    app_log_level: str = "INFO"

    # Nested settings
    registry: RegistrySettings = Field(default_factory=RegistrySettings)

    @property
    def is_production(self) -> bool:
        """Check if running in production."""
        return self.app_env == "production"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
