"""
Configuration loader with TOML support, environment variable overrides, and validation.
"""

import tomllib
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from domain.models import Region


class BlizzardConfig(BaseModel):
    """Blizzard API configuration."""

    client_id: str = Field(default="")
    client_secret: SecretStr = Field(default=SecretStr(""))
    region: Region = Field(default=Region.US)
    locale: str = Field(default="en_US")
    request_timeout: Optional[float] = Field(default=None, gt=0)

    @field_validator("client_id")
    @classmethod
    def validate_client_id(cls, v: str) -> str:
        """Validate that client ID is provided."""
        if not v or v.strip() == "":
            raise ValueError("API client ID must be provided")
        return v.strip()

    @field_validator("client_secret")
    @classmethod
    def validate_client_secret(cls, v: SecretStr) -> SecretStr:
        """Validate that client secret is provided."""
        secret_value = v.get_secret_value() if isinstance(v, SecretStr) else v
        if not secret_value or secret_value.strip() == "":
            raise ValueError("API client secret must be provided")
        return v

    @field_validator("region", mode="before")
    @classmethod
    def validate_region(cls, v: Any) -> Region:
        """Accept region codes ("eu") as well as the numeric values."""
        if isinstance(v, str) and not v.isdigit():
            return Region.from_code(v)
        return Region(int(v))


class Config(BaseSettings):
    """Main application configuration."""

    model_config = SettingsConfigDict(
        env_prefix="BNET_",
        env_nested_delimiter="__",
        env_file=".env",
        case_sensitive=False,
    )

    blizzard: BlizzardConfig = Field(default_factory=BlizzardConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # Environment wins over values passed in from the TOML file.
        return env_settings, dotenv_settings, init_settings, file_secret_settings


def load_config(config_path: str | Path = "config.toml") -> Config:
    """
    Load configuration from TOML file with environment variable overrides.

    Environment variables follow the pattern:
    - BNET_BLIZZARD__REGION
    - BNET_BLIZZARD__LOCALE
    - BNET_BLIZZARD__CLIENT_ID
    - BNET_BLIZZARD__CLIENT_SECRET

    Args:
        config_path: Path to the TOML configuration file

    Returns:
        Validated Config object

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If configuration is invalid
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path, "rb") as f:
        toml_data = tomllib.load(f)

    return Config(**toml_data)
