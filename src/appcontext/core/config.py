"""Settings that tune how application contexts are bootstrapped.

The defaults follow the conventional installation layout: the primary config
lives at ``config/app.py`` and exposes a module-level ``configure`` callable.
Deployments override any of them through ``APPCONTEXT_*`` environment
variables.
"""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ContextSettings(BaseSettings):
    """Pydantic settings container for the bootstrap layer."""

    model_config = SettingsConfigDict(env_prefix="APPCONTEXT_", frozen=True)

    primary_config_filename: str = Field(
        default="app.py",
        min_length=1,
        description="Filename of the primary config inside the config directory.",
    )
    config_entrypoint: str = Field(
        default="configure",
        min_length=1,
        description="Module-level callable a config file must define.",
    )
    development_env_key: str = Field(
        default="DEVELOPMENT",
        min_length=1,
        description="Environment key consulted by ``in_development``.",
    )

    @field_validator("config_entrypoint")
    @classmethod
    def _entrypoint_is_identifier(cls, value: str) -> str:
        if not value.isidentifier():
            raise ValueError(f"config_entrypoint must be a Python identifier, got {value!r}")
        return value

    @classmethod
    def build_default(cls) -> "ContextSettings":
        """Construct settings from defaults and the process environment."""

        return cls()


__all__ = ["ContextSettings"]
