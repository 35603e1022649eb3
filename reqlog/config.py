"""reqlog configuration — loaded from environment variables."""

from __future__ import annotations

from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings, loaded from environment variables.

    All settings are prefixed with REQLOG_ (e.g., REQLOG_LOG_FORMAT).
    """

    # Demo server
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False

    # Logging
    log_level: str = "INFO"
    log_format: str = "text"

    # Access log
    access_logger_name: str = "reqlog.access"
    access_log_level: str = "INFO"
    # Ordered field allowlist; JSON list in the environment
    access_log_fields: list[str] | None = None

    model_config = {"env_prefix": "REQLOG_"}

    @field_validator("log_level", "access_log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid:
            raise ValueError(f"log_level must be one of {valid}")
        return v.upper()

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        if v.lower() not in ("text", "json"):
            raise ValueError("log_format must be 'text' or 'json'")
        return v.lower()

    @field_validator("access_log_fields")
    @classmethod
    def validate_access_log_fields(cls, v: list[str] | None) -> list[str] | None:
        if v is not None and not v:
            raise ValueError("access_log_fields must name at least one field")
        return v


settings = Settings()
