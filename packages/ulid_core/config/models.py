"""Typed configuration models for ULID generation and logging."""

from __future__ import annotations

from contextvars import ContextVar
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "ulid" / "ulid.yaml"

_CONFIG_PATH: ContextVar[Path] = ContextVar("ulid_config_path", default=DEFAULT_CONFIG_PATH)


class LoggingSettings(BaseModel):
    """Structured logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    json_output: bool = True
    service: str = "ulid"
    environment: str = "dev"


class GeneratorSettings(BaseModel):
    """ULID factory configuration.

    ``drift_tolerance_ms`` is the backward clock step a monotonic factory
    absorbs by incrementing; 1 means only a repeated millisecond is absorbed.
    """

    strategy: Literal["default", "monotonic"] = "monotonic"
    random_source: Literal["bytes", "words"] = "bytes"
    drift_tolerance_ms: int = Field(default=10_000, ge=1)
    regression_policy: Literal["reset", "clamp"] = "reset"
    lowercase: bool = False


class UlidSettings(BaseSettings):
    """Root settings resolved from init/env/yaml/defaults sources."""

    model_config = SettingsConfigDict(
        env_prefix="ULID_",
        env_nested_delimiter="__",
        extra="ignore",
        nested_model_default_partial_update=True,
    )

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    generator: GeneratorSettings = Field(default_factory=GeneratorSettings)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Apply precedence: init > env > yaml > model defaults."""
        return (
            init_settings,
            env_settings,
            YamlConfigSettingsSource(
                settings_cls,
                yaml_file=_CONFIG_PATH.get(),
                yaml_file_encoding="utf-8",
            ),
        )
