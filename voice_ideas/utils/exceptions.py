"""
Custom exception classes for the voice ideas package.

The entry classifier itself never raises; these exceptions cover the
collaborators around it:
- Ingestion errors (unreadable or header-less source files)
- Configuration errors
"""

from pathlib import Path
from typing import Any, Optional, Union


class VoiceIdeasError(Exception):
    """
    Base exception for all voice ideas errors.

    All custom exceptions in this project inherit from this class,
    allowing for broad exception catching when needed.
    """

    def __init__(
        self,
        message: str,
        *,
        details: Optional[dict[str, Any]] = None,
        cause: Optional[Exception] = None,
    ) -> None:
        """
        Initialize the exception.

        Args:
            message: Human-readable error message
            details: Additional error details as key-value pairs
            cause: Original exception that caused this error
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.cause = cause

    def __str__(self) -> str:
        """Return string representation with details."""
        base = self.message
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            base = f"{base} ({details_str})"
        if self.cause:
            base = f"{base} [caused by: {self.cause}]"
        return base

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for logging/serialization."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
            "cause": str(self.cause) if self.cause else None,
        }


class IngestionError(VoiceIdeasError):
    """
    Exception for record ingestion errors.

    Raised when a source file cannot be turned into voice entries at all.
    Row-level problems never raise; they degrade to field defaults.
    """

    def __init__(
        self,
        message: str,
        *,
        path: Optional[Union[str, Path]] = None,
        line_number: Optional[int] = None,
        **kwargs: Any,
    ) -> None:
        """
        Initialize ingestion error.

        Args:
            message: Error message
            path: Source file that failed to load
            line_number: 1-based line in the source, if known
            **kwargs: Additional arguments passed to parent
        """
        details = kwargs.pop("details", {})
        if path is not None:
            details["path"] = str(path)
        if line_number is not None:
            details["line_number"] = line_number

        super().__init__(message, details=details, **kwargs)
        self.path = path
        self.line_number = line_number


class ConfigurationError(VoiceIdeasError):
    """
    Exception for configuration errors.

    Raised when required configuration is missing or invalid.
    """

    def __init__(
        self,
        message: str,
        *,
        missing_keys: Optional[list[str]] = None,
        invalid_keys: Optional[dict[str, str]] = None,
        **kwargs: Any,
    ) -> None:
        """
        Initialize configuration error.

        Args:
            message: Error message
            missing_keys: List of required configuration keys that are missing
            invalid_keys: Dict of invalid keys and their error messages
            **kwargs: Additional arguments passed to parent
        """
        details = kwargs.pop("details", {})
        if missing_keys:
            details["missing_keys"] = missing_keys
        if invalid_keys:
            details["invalid_keys"] = invalid_keys

        super().__init__(message, details=details, **kwargs)
        self.missing_keys = missing_keys or []
        self.invalid_keys = invalid_keys or {}
