"""orgconfig Core Exceptions Package - Exception hierarchy for orgconfig.

- OrgConfigError: base class, carries message, context and cause
- ConfigurationError: unreadable files, merge conflicts
- InvalidConfiguration: option values that fail validation
"""

from .core import (
    ConfigurationError,
    InvalidConfiguration,
    OrgConfigError,
)

__all__ = [
    # Base exception
    "OrgConfigError",

    # Configuration exceptions
    "ConfigurationError",
    "InvalidConfiguration",
]
