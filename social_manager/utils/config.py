"""Configuration management for Social Manager using pydantic-settings."""

import os
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Ensure .env is loaded so ${VAR} expansion and os.environ lookups work
load_dotenv(dotenv_path=Path(".") / ".env", override=False)


class SocialManagerConfig(BaseModel):
    """Core plugin configuration shared with the theme supports resolver."""

    name: str = "Social Manager"
    version: str = "1.1.0"
    # Identifier the theme registers, e.g. add_theme_support("ninecodes-social-manager")
    feature_name: str = "ninecodes-social-manager"
    # Default prefix for output markup attributes
    attr_prefix: str = "ninecodes"
    buttons_modes: dict[str, str] = Field(
        default_factory=lambda: {
            "html": "HTML (Default)",
            "json": "JSON",
        }
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    format: str = "json"
    file: str = ""  # Empty = stdout only
    max_size_mb: int = 10
    backup_count: int = 3


class Settings(BaseSettings):
    """Main settings class that loads from YAML and environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SOCIAL_MANAGER_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    social_manager: SocialManagerConfig = Field(default_factory=SocialManagerConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def from_yaml(cls, config_path: str | Path | None = None) -> "Settings":
        """Load settings from YAML file with environment variable overrides."""
        if config_path is None:
            possible_paths = [
                Path("config/settings.yaml"),
                Path("config/settings.local.yaml"),
                Path.home() / ".config/social-manager/settings.yaml",
            ]
            for path in possible_paths:
                if path.exists():
                    config_path = path
                    break

        config_data: dict[str, Any] = {}
        if config_path and Path(config_path).exists():
            with open(config_path) as f:
                config_data = yaml.safe_load(f) or {}

        config_data = cls._expand_env_vars(config_data)

        try:
            instance = cls(**config_data)
        except Exception as e:
            raise ValueError(f"Invalid config: {e}") from e
        instance.validate()
        return instance

    def validate(self) -> None:
        """Validate critical config. Raises ValueError on failure."""
        errors: list[str] = []
        core = self.social_manager
        if not core.feature_name.strip():
            errors.append("social_manager.feature_name must be a non-empty string")
        if not core.attr_prefix.strip():
            errors.append("social_manager.attr_prefix must be a non-empty string")
        if not core.buttons_modes:
            errors.append("social_manager.buttons_modes must define at least one mode")
        if self.logging.format not in ("json", "text"):
            errors.append("logging.format must be 'json' or 'text'")
        if errors:
            raise ValueError("Config validation failed: " + "; ".join(errors))

    @classmethod
    def _expand_env_vars(cls, data: Any) -> Any:
        """Recursively expand environment variables in config values."""
        if isinstance(data, dict):
            return {k: cls._expand_env_vars(v) for k, v in data.items()}
        elif isinstance(data, list):
            return [cls._expand_env_vars(item) for item in data]
        elif isinstance(data, str):
            # Expand ${VAR} patterns
            if data.startswith("${") and data.endswith("}"):
                env_var = data[2:-1]
                return os.environ.get(env_var, "")
            return data
        return data


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings.from_yaml()


def reload_settings() -> Settings:
    """Reload settings (clears cache)."""
    get_settings.cache_clear()
    return get_settings()
