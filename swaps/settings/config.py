"""
Configuration management for the swaps core.
"""
from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

PROJECT_ROOT = Path(__file__).resolve().parents[2]


# Load environment variables from .env file if it exists
try:
    from dotenv import load_dotenv
    env_file = Path(".env")
    if env_file.exists():
        load_dotenv(env_file, override=False)  # Don't override existing env vars
    else:
        load_dotenv(PROJECT_ROOT / ".env", override=False)
except ImportError:
    # python-dotenv not installed, pydantic-settings will handle env vars
    pass


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        extra="ignore",
        env_ignore_empty=True,
        env_file=str(PROJECT_ROOT / ".env"),
        env_file_encoding="utf-8",
    )

    app_name: str = "Swaps Core"
    environment: str = Field(default="development", validation_alias="ENVIRONMENT")

    # Logging
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    log_file: str = Field(default="logs/swaps.log", validation_alias="LOG_FILE")
    log_to_file: bool = Field(default=True, validation_alias="LOG_TO_FILE")

    # Swaps
    swaps_mainnet_chain_id: str = Field(default="1", validation_alias="SWAPS_MAINNET_CHAIN_ID")
    swaps_max_tokens_with_balance: int = Field(
        default=5,
        ge=1,
        validation_alias="SWAPS_MAX_TOKENS_WITH_BALANCE",
    )
    contract_metadata_path: Optional[str] = Field(
        default=None,
        validation_alias="SWAPS_CONTRACT_METADATA_PATH",
    )

    @field_validator("swaps_mainnet_chain_id", mode="before")
    @classmethod
    def normalise_chain_id(cls, value: object) -> str:
        return str(value).strip()

    @property
    def log_path(self) -> Path:
        """Resolve the log file relative to the working directory when not absolute."""
        path = Path(self.log_file)
        return path if path.is_absolute() else Path.cwd() / path


# Global settings instance
settings = Settings()
