"""Application configuration using pydantic-settings."""
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class BrowserConfig(BaseModel):
    """Browser launch / attach configuration."""

    model_config = ConfigDict(frozen=True)

    use_chrome: bool = True
    browser_ws: str = ""
    headless: bool = True
    devtools: bool = False
    browser_args: Optional[list[str]] = None
    launch_options: dict[str, Any] = Field(default_factory=dict)
    user_data_dir: str = ""
    token_dir: str = "tokens"


class Settings(BaseSettings):
    """Application settings loaded from YAML or environment."""

    model_config = SettingsConfigDict(env_prefix="WPP_", env_nested_delimiter="__")

    session: str = "default"
    log_level: str = "INFO"
    log_file: str = ""
    browser: BrowserConfig = BrowserConfig()

    @classmethod
    def from_yaml(cls, path: Path) -> "Settings":
        """Load settings from a YAML file.

        Args:
            path: Path to the YAML configuration file.

        Returns:
            Settings instance with loaded configuration.
        """
        with open(path) as f:
            data = yaml.safe_load(f) or {}
        return cls(**data)
