import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from apology_generator.prompt import DEFAULT_PROMPT_TEMPLATE, DESCRIPTION_PLACEHOLDER

DEFAULT_MODEL = "gemini:gemini-1.5-flash"
DEFAULT_SUPPORT_URL = "https://roihacks.gumroad.com/coffee"
FALLBACK_API_KEY_ENV = "GEMINI_API_KEY"


class GeneratorConfig(BaseSettings):
    """Generator configuration with support for YAML files and environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="APOLOGY_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    host: str = Field(default="0.0.0.0", description="Host to bind the server to")  # noqa: S104
    port: int = Field(default=8000, description="Port to bind the server to")
    model: str = Field(default=DEFAULT_MODEL, description="Generation model as 'provider:model'")
    api_key: str | None = Field(
        default=None,
        description=f"Provider credential (falls back to the {FALLBACK_API_KEY_ENV} environment variable)",
    )
    prompt_template: str = Field(
        default=DEFAULT_PROMPT_TEMPLATE,
        description="Instruction template; '{description}' is replaced with the user's text",
    )
    copy_ack_seconds: float = Field(
        default=2.0,
        ge=0,
        description="How long the 'copied' confirmation stays visible",
    )
    support_url: str = Field(default=DEFAULT_SUPPORT_URL, description="Target of the 'Buy us a coffee' links")
    log_level: str = Field(default="INFO", description="Log level for the package logger")

    @field_validator("prompt_template")
    @classmethod
    def _require_placeholder(cls, value: str) -> str:
        if DESCRIPTION_PLACEHOLDER not in value:
            msg = "prompt_template must contain a '{description}' placeholder"
            raise ValueError(msg)
        return value

    def resolved_api_key(self) -> str | None:
        """Return the configured credential, or the provider's conventional env var."""
        return self.api_key or os.getenv(FALLBACK_API_KEY_ENV) or None


def load_config(config_path: str | None = None) -> GeneratorConfig:
    """Load configuration from file and environment variables.

    Args:
        config_path: Optional path to YAML config file

    Returns:
        GeneratorConfig instance with merged configuration

    """
    config_dict: dict[str, Any] = {}

    if config_path and Path(config_path).exists():
        with open(config_path, encoding="utf-8") as f:
            yaml_config = yaml.safe_load(f)
            if yaml_config:
                resolved = _resolve_env_vars(yaml_config)
                config_dict = {key: value for key, value in resolved.items() if value is not None}

    return GeneratorConfig(**config_dict)


def _resolve_env_vars(config: Any) -> Any:
    """Recursively resolve environment variable references in config.

    Supports ${VAR_NAME} syntax in string values. Unset variables resolve to None.
    """
    if isinstance(config, dict):
        return {key: _resolve_env_vars(value) for key, value in config.items()}
    if isinstance(config, list):
        return [_resolve_env_vars(item) for item in config]
    if isinstance(config, str) and config.startswith("${") and config.endswith("}"):
        return os.getenv(config[2:-1])
    return config
