"""
Exceptions package for the WCAG server.

This package contains the error taxonomy reported to resource callers and
the configuration errors raised while loading settings.
"""

from .config_exceptions import (
    ConfigurationError,
    EnvironmentVariableError,
)

from .resolution_exceptions import (
    WcagServerError,
    InvalidRequestError,
    InvalidIdentifierError,
    DocumentNotFoundError,
    UnknownPrefixError,
    InternalServerError,
)

__all__ = [
    # Configuration exceptions
    "ConfigurationError",
    "EnvironmentVariableError",
    # Resolution exceptions
    "WcagServerError",
    "InvalidRequestError",
    "InvalidIdentifierError",
    "DocumentNotFoundError",
    "UnknownPrefixError",
    "InternalServerError",
]
