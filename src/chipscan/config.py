"""Configuration management for chipscan."""

from pydantic import field_validator
from pydantic_settings import BaseSettings

from chipscan.logging_utils import LogLevel


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Google Docs API
    google_access_token: str = ""
    docs_api_base: str = "https://docs.googleapis.com/v1"
    http_timeout: float = 30.0

    # Classification
    keep_blank_text: bool = False  # Emit records for whitespace-only text runs

    # Output
    json_indent: int = 2

    # Logging
    log_level: str = "WARNING"

    @field_validator("docs_api_base")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Normalize the API base so paths can be appended with a slash."""
        return v.rstrip("/")

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in LogLevel.__members__:
            raise ValueError(
                f"log_level must be one of {', '.join(LogLevel.__members__)}, got {v!r}"
            )
        return level

    class Config:
        env_prefix = "CHIPSCAN_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


settings = Settings()
