"""Configuration Management."""

from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Settings(BaseSettings):
    """Library settings from environment."""

    model_config = SettingsConfigDict(
        env_prefix="SNAPUI_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra environment variables
    )

    # Logging
    log_level: str = Field(default="INFO", description="Log level")
    json_logs: bool = Field(default=False, description="Use JSON log format")

    # Limits for untrusted JSON content
    max_content_size: int = Field(
        default=10_000_000, gt=0, description="Max size of component JSON (bytes)"
    )
    max_json_depth: int = Field(default=256, gt=0, description="Max JSON nesting depth")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
