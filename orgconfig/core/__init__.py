"""orgconfig Core Package - Domain models, types, exceptions and configuration.

Modules:
    models: Keyword classification and headline models
    types: Common type definitions and enums
    exceptions: Core exception classes for error handling
    config: Option models, sources and merging
"""

from .exceptions import ConfigurationError, InvalidConfiguration, OrgConfigError
from .models import FastAccessEntry, Headline, KeywordClassification, KeywordSpec
from .types import AgendaSpan, KeywordCategory, OrgFileType

__all__ = [
    # Domain Models
    "FastAccessEntry",
    "Headline",
    "KeywordClassification",
    "KeywordSpec",

    # Types
    "AgendaSpan",
    "KeywordCategory",
    "OrgFileType",

    # Exceptions
    "OrgConfigError",
    "ConfigurationError",
    "InvalidConfiguration",
]
