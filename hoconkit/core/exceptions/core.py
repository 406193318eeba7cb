"""hoconkit Core Exceptions - Core exception classes for error handling.

This module contains the exception hierarchy for hoconkit. Invalid arguments
handed to the render options value surface as ValidationError; problems with
settings files or environment-provided settings surface as ConfigurationError.
"""

from typing import Optional, Any, Dict


class HoconKitError(Exception):
    """Base exception for all hoconkit-specific errors.

    Carries an optional context dictionary and the underlying cause so callers
    can report where an error came from without parsing the message.
    """

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        """Initialize hoconkit error.

        Args:
            message: Human-readable error description
            context: Optional dictionary with error context (e.g., file paths, field names)
            cause: Optional underlying exception that caused this error
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}
        self.cause = cause

    def __str__(self) -> str:
        """Return formatted error message with context."""
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} (context: {context_str})"
        return self.message

    def add_context(self, key: str, value: Any) -> "HoconKitError":
        """Add context information to the error."""
        self.context[key] = value
        return self


class ValidationError(HoconKitError, ValueError):
    """Raised when an argument fails validation.

    Also a ValueError, so callers that only know about the built-in
    invalid-argument exception still catch it.
    """

    def __init__(
        self,
        field: str,
        value: Any,
        reason: str,
        context: Optional[Dict[str, Any]] = None
    ):
        """Initialize validation error.

        Args:
            field: Name of the field that failed validation
            value: The invalid value
            reason: Description of why validation failed
            context: Optional additional context
        """
        message = f"Validation failed for field '{field}': {reason}"
        super().__init__(message, context)
        self.field = field
        self.value = value
        self.reason = reason


class ConfigurationError(HoconKitError):
    """Raised when settings files or environment settings are invalid."""

    def __init__(
        self,
        config_key: Optional[str] = None,
        config_value: Optional[Any] = None,
        reason: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        """Initialize configuration error.

        Args:
            config_key: Configuration key or file that caused the error
            config_value: Invalid configuration value
            reason: Description of what went wrong
            context: Optional additional context
            cause: Optional underlying exception
        """
        if config_key:
            message = f"Configuration error for '{config_key}': {reason}"
        else:
            message = f"Configuration error: {reason}" if reason else "Configuration error"

        super().__init__(message, context, cause)
        self.config_key = config_key
        self.config_value = config_value
        self.reason = reason
