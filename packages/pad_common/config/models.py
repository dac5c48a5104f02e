"""Typed configuration models for envelope runtime settings."""

from __future__ import annotations

from pathlib import Path
from typing import ClassVar, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "pad" / "pad.yaml"
ENV_PREFIX = "PAD_"


class LoggingSettings(BaseModel):
    """Structured logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    json_output: bool = True
    service: str = "pad"
    environment: str = "dev"


class CodecSettings(BaseModel):
    """Rendering and parsing knobs for the envelope XML codec."""

    model_config = ConfigDict(frozen=True)

    pretty_print: bool = True
    indent: str = Field(default="    ", pattern=r"^[ \t]*$")
    xml_declaration: bool = True
    max_input_chars: int = Field(default=1_048_576, gt=0)
    error_excerpt_chars: int = Field(default=200, ge=0)


class PadSettings(BaseSettings):
    """Root runtime settings resolved from init/env/yaml/defaults sources."""

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_nested_delimiter="__",
        extra="ignore",
        nested_model_default_partial_update=True,
    )

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    codec: CodecSettings = Field(default_factory=CodecSettings)

    _config_path: ClassVar[Path] = DEFAULT_CONFIG_PATH
    _read_process_env: ClassVar[bool] = True

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
        sources: list[PydanticBaseSettingsSource] = [init_settings]
        if cls._read_process_env:
            sources.append(env_settings)
        sources.append(
            YamlConfigSettingsSource(
                settings_cls,
                yaml_file=cls._config_path,
                yaml_file_encoding="utf-8",
            )
        )
        return tuple(sources)
