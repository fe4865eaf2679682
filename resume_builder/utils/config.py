"""
Configuration management for the resume builder.

Uses Pydantic Settings for type-safe configuration with environment variable support.
"""

from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# Base paths
ROOT_DIR = Path(__file__).parent.parent.parent


class UploadSettings(BaseSettings):
    """Uploaded resume file configuration."""

    model_config = SettingsConfigDict(env_prefix="UPLOAD_")

    max_file_size: int = 10 * 1024 * 1024
    upload_dir: Path = Path("./uploads")

    # Plain text uploads under this size get a "parsing may be limited" warning
    small_text_warning_bytes: int = 1024

    @field_validator("max_file_size")
    @classmethod
    def validate_max_file_size(cls, v: int) -> int:
        """Reject non-positive limits."""
        if v <= 0:
            raise ValueError("max_file_size must be a positive number of bytes")
        return v

    @property
    def max_file_size_mb(self) -> int:
        """Upload limit rounded to whole megabytes."""
        return round(self.max_file_size / (1024 * 1024))


class EnhancementSettings(BaseSettings):
    """Generative enhancement configuration."""

    model_config = SettingsConfigDict(env_prefix="ENHANCE_")

    default_style: Literal["professional", "creative", "concise"] = "professional"

    # Pause between enhanced sections to stay under provider rate limits
    section_delay_seconds: float = 1.0


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(env_prefix="LOG_")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: str = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}"
    file_path: Path = ROOT_DIR / "logs" / "resume_builder.log"
    rotation: str = "10 MB"
    retention: str = "30 days"
    console_output: bool = True
    file_output: bool = True


class AppSettings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="APP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application metadata
    name: str = "Resume Builder"
    version: str = "0.1.0"
    description: str = "Resume parsing and structuring backend"
    debug: bool = False

    # Environment
    environment: Literal["development", "production", "testing"] = "development"

    # Nested settings
    upload: UploadSettings = Field(default_factory=UploadSettings)
    enhancement: EnhancementSettings = Field(default_factory=EnhancementSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


# Global settings instance (singleton pattern)
_settings: AppSettings | None = None


def get_settings() -> AppSettings:
    """Get or create the global settings instance."""
    global _settings
    if _settings is None:
        _settings = AppSettings()
    return _settings


def reload_settings() -> AppSettings:
    """Force reload settings from environment."""
    global _settings
    _settings = AppSettings()
    return _settings
