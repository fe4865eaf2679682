"""
Utility modules for the resume builder.

This package contains shared utilities used across the application:
- config: Configuration management
- logger: Logging infrastructure
- constants: Application-wide constants
"""

from resume_builder.utils.config import (
    AppSettings,
    get_settings,
    reload_settings,
    ROOT_DIR,
)
from resume_builder.utils.constants import (
    APP_NAME,
    APP_DISPLAY_NAME,
    VERSION,
    SUPPORTED_MEDIA_TYPES,
    SUPPORTED_RESUME_FORMATS,
    EnhancementStyle,
    MediaType,
    SectionType,
)
from resume_builder.utils.logger import (
    setup_logging,
    get_logger,
    log,
)

__all__ = [
    # Config
    "AppSettings",
    "get_settings",
    "reload_settings",
    "ROOT_DIR",
    # Constants
    "APP_NAME",
    "APP_DISPLAY_NAME",
    "VERSION",
    "SUPPORTED_MEDIA_TYPES",
    "SUPPORTED_RESUME_FORMATS",
    "EnhancementStyle",
    "MediaType",
    "SectionType",
    # Logger
    "setup_logging",
    "get_logger",
    "log",
]
