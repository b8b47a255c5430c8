"""orgconfig Core Exceptions - Core exception classes for error handling.

This module contains the exception hierarchy for orgconfig. Every error the
library raises derives from OrgConfigError so callers can catch a single
type at the boundary.
"""

from typing import Optional, Any, Dict


class OrgConfigError(Exception):
    """Base exception for all orgconfig-specific errors.
    
    Carries an optional context dictionary and the underlying cause so the
    CLI can report where a bad option came from.
    """
    
    def __init__(
        self, 
        message: str, 
        context: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        """Initialize orgconfig error.
        
        Args:
            message: Human-readable error description
            context: Optional dictionary with error context (e.g., option names, file paths)
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


class ConfigurationError(OrgConfigError):
    """Raised when configuration is invalid or cannot be loaded.
    
    Used for problems with configuration files, merge conflicts and
    environment overrides.
    """
    
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
            config_key: Configuration key that caused the error
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


class InvalidConfiguration(ConfigurationError):
    """Raised when option values fail validation.

    The TODO keyword list is the main source: an empty list leaves no
    terminal state to classify.
    """
