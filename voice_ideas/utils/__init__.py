"""
Utility modules for the voice ideas package.

This package contains:
- config: Configuration management with Pydantic
- logger: Structured logging setup
- exceptions: Custom exception classes
"""

from voice_ideas.utils.config import get_settings, Settings
from voice_ideas.utils.logger import get_logger, setup_logging
from voice_ideas.utils.exceptions import (
    VoiceIdeasError,
    IngestionError,
    ConfigurationError,
)

__all__ = [
    "get_settings",
    "Settings",
    "get_logger",
    "setup_logging",
    "VoiceIdeasError",
    "IngestionError",
    "ConfigurationError",
]
