"""Annuminas - Docker Hub repository and access-token client."""

from annuminas.client import HubClient
from annuminas.exceptions import (
    APIError,
    AuthError,
    ConfigurationError,
    DecodeError,
    EncodeError,
    HubError,
    TransportError,
)
from annuminas.logging import configure_logging, get_logger
from annuminas.transport import PAGE_SIZE, AuthMode, HTTPTransport
from annuminas.types import AccessToken, Page, Repository

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Main Client
    "HubClient",
    # Exceptions
    "HubError",
    "AuthError",
    "TransportError",
    "APIError",
    "EncodeError",
    "DecodeError",
    "ConfigurationError",
    # Transport
    "HTTPTransport",
    "AuthMode",
    "PAGE_SIZE",
    # Types
    "Repository",
    "AccessToken",
    "Page",
    # Logging
    "configure_logging",
    "get_logger",
]
