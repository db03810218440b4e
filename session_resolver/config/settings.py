import os

from loguru import logger
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    redis_url: str = Field(default="redis://localhost:6379/0", validation_alias="REDIS_URL")
    session_cache_ttl_seconds: int = Field(
        default=86400,
        validation_alias="SESSION_CACHE_TTL_SECONDS",
        description="Expiry for session-input and muscle-selection snapshots (24h)",
    )
    muscle_api_url: str = Field(
        default="http://localhost:8000/wp-json/fitcopilot/v1",  # Default for local dev; MUST be set to the deployed site in production
        validation_alias="MUSCLE_API_URL",
        description="Base URL of the remote muscle-selection persistence endpoint",
    )
    muscle_api_timeout_seconds: float = Field(default=10.0, validation_alias="MUSCLE_API_TIMEOUT_SECONDS")
    muscle_sync_debounce_ms: int = Field(
        default=150,
        validation_alias="MUSCLE_SYNC_DEBOUNCE_MS",
        description="Debounce window for remote muscle-selection writes",
    )
    max_muscle_groups: int = Field(default=3, validation_alias="MAX_MUSCLE_GROUPS")
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    log_file: str | None = Field(
        default=None,
        validation_alias="LOG_FILE",
        description="Optional rotating log file; console only when unset",
    )
    debug_mapping: bool = Field(
        default=False,
        validation_alias="DEBUG_MAPPING",
        description="Log the parameter-mapping verification block on every resolution",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Validate that log level is one of the standard logging levels."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_value = value.upper()
        if upper_value not in valid_levels:
            logger.warning(f"Invalid LOG_LEVEL '{value}'. Valid levels are: {', '.join(valid_levels)}. Defaulting to INFO.")
            return "INFO"
        return upper_value

    @field_validator("muscle_sync_debounce_ms")
    @classmethod
    def validate_debounce(cls, value: int) -> int:
        """Negative debounce windows collapse to an immediate sync."""
        if value < 0:
            logger.warning(f"MUSCLE_SYNC_DEBOUNCE_MS must be >= 0, got {value}. Using 0.")
            return 0
        return value

    @field_validator("max_muscle_groups")
    @classmethod
    def validate_max_groups(cls, value: int) -> int:
        """Validate the muscle group limit is at least one."""
        if value < 1:
            logger.warning(f"MAX_MUSCLE_GROUPS must be >= 1, got {value}. Using 3.")
            return 3
        return value

    @field_validator("muscle_api_url")
    @classmethod
    def validate_muscle_api_url(cls, value: str) -> str:
        """Warn when the muscle endpoint points at localhost in production."""
        is_production = bool(os.getenv("RENDER") or os.getenv("RAILWAY_ENVIRONMENT") or os.getenv("DYNO"))
        if is_production and ("localhost" in value or "127.0.0.1" in value):
            logger.error(
                f"⚠️ CRITICAL: MUSCLE_API_URL is set to localhost in production: {value}\n"
                "⚠️ Muscle selections will not be persisted. Set MUSCLE_API_URL to the deployed site."
            )
        return value.rstrip("/")


settings = Settings()
