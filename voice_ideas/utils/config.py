"""
Configuration management for the voice ideas package.

Uses Pydantic Settings for type-safe configuration with environment variable support.
"""

from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(str, Enum):
    """Application environment."""

    DEVELOPMENT = "development"
    TEST = "test"
    PRODUCTION = "production"


class LogLevel(str, Enum):
    """Logging level."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class IngestionSettings(BaseModel):
    """
    Voice entry ingestion configuration.

    Not read from the environment directly. Settings fills it from
    ENTRIES_CSV_PATH and MAX_ENTRIES.
    """

    csv_path: Path = Field(
        default=Path("data/voice_entries.csv"),
        description="CSV file holding exported voice entries",
    )
    max_entries: int = Field(
        default=20,
        ge=1,
        description="Maximum number of data rows read from a source file",
    )


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(env_prefix="LOG_")

    level: LogLevel = Field(default=LogLevel.INFO, description="Log level")
    dir: Optional[Path] = Field(
        default=None, description="Log directory, file logging disabled if unset"
    )
    json_format: bool = Field(default=False, description="Use JSON log format")

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: str | LogLevel) -> str | LogLevel:
        """Accept lower-case level names."""
        return v.upper() if isinstance(v, str) else v

    @field_validator("dir", mode="before")
    @classmethod
    def ensure_path(cls, v: Optional[str | Path]) -> Optional[Path]:
        """Ensure log directory is a Path object."""
        if v is None or v == "":
            return None
        return Path(v) if isinstance(v, str) else v


class Settings(BaseSettings):
    """
    Main application settings.

    Aggregates all configuration sections and provides a unified interface.
    Configuration is loaded from environment variables and .env files.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    environment: Environment = Field(
        default=Environment.DEVELOPMENT, description="Application environment"
    )

    # Component settings
    ingestion: IngestionSettings = Field(default_factory=IngestionSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    # Direct access fields (loaded from env)
    entries_csv_path: str = Field(default="data/voice_entries.csv")
    max_entries: int = Field(default=20, ge=1)
    log_level: str = Field(default="INFO")
    log_dir: str = Field(default="")
    log_json_format: bool = Field(default=False)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Reject log levels the logging module does not know."""
        upper = v.upper()
        if upper not in LogLevel.__members__:
            raise ValueError(f"Unknown log level: {v}")
        return upper

    def model_post_init(self, __context) -> None:
        """Sync nested settings with flat environment variables."""
        self.ingestion = IngestionSettings(
            csv_path=Path(self.entries_csv_path),
            max_entries=self.max_entries,
        )

        self.logging = LoggingSettings(
            level=LogLevel(self.log_level),
            dir=self.log_dir or None,
            json_format=self.log_json_format,
        )

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == Environment.PRODUCTION


@lru_cache
def get_settings() -> Settings:
    """
    Get cached application settings.

    Returns:
        Singleton Settings instance loaded from environment.
    """
    return Settings()


def reload_settings() -> Settings:
    """
    Reload settings, clearing the cache.

    Returns:
        Fresh Settings instance.
    """
    get_settings.cache_clear()
    return get_settings()
