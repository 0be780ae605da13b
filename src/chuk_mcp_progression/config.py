"""
Configuration for the text generator.

Settings come from an optional YAML file (JSON also parses, so a
``config.json`` with an ``apiKey`` field works as-is). Environment
variables (``OPENAI_API_KEY`` and ``CHUK_PROGRESSION_*``) take precedence
over the file.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import AliasChoices, Field, ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from chuk_mcp_progression.constants import DEFAULT_MODEL, DEFAULT_TIMEOUT, ENV_PREFIX
from chuk_mcp_progression.errors import ConfigurationError


class GeneratorConfig(BaseSettings):
    """Settings for the OpenAI-backed text generator."""

    api_key: str | None = Field(
        None,
        validation_alias=AliasChoices("OPENAI_API_KEY", "apiKey", "api_key"),
        description="API key",
    )
    model: str = Field(DEFAULT_MODEL, description="Model name")
    base_url: str | None = Field(None, description="OpenAI-compatible endpoint")
    temperature: float = Field(0.7, ge=0.0, le=2.0, description="Sampling temperature")
    timeout: float = Field(DEFAULT_TIMEOUT, gt=0, description="Per-request timeout in seconds")

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_ignore_empty=True,
        case_sensitive=False,
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # Environment beats file values passed in as init kwargs
        return env_settings, init_settings, dotenv_settings, file_secret_settings


def _read_file(path: Path) -> dict[str, Any]:
    """Read a YAML/JSON mapping from disk."""
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigurationError(f"Cannot read config file {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file {path} must contain a mapping")
    return data


def load_config(path: Path | None = None) -> GeneratorConfig:
    """
    Load generator settings.

    Args:
        path: Optional config file. A missing file means defaults.

    Returns:
        The merged GeneratorConfig

    Raises:
        ConfigurationError: The file is unreadable or has invalid values
    """
    data: dict[str, Any] = {}
    if path is not None and path.exists():
        data = _read_file(path)

    try:
        return GeneratorConfig(**data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e
