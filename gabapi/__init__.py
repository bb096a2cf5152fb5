"""
Gab.com API client.

Public API:
    GabAPIClient: Authorization and authenticated API calls
    GabClientConfig: Immutable client configuration
    TokenResult: Tokens returned by an OAuth exchange
    ResponseEnvelope: Uniform {success, message, code, data} response
    Scope: Known OAuth scopes

Exceptions:
    GabAPIError: Base exception
    ConfigurationError, InvalidParameterError, InvalidURLError,
    TransportError, ResponseParseError, HTMLResponseError,
    AuthorizationError, InvalidTokenResponseError,
    TokenExchangeError, TokenRefreshError
"""

from .client import GabAPIClient
from .config import GabClientConfig
from .constants import ACCEPTED_METHODS, REQUESTS_PER_MINUTE, SCOPES, VERSION, Scope
from .exceptions import (
    AuthorizationError,
    ConfigurationError,
    GabAPIError,
    HTMLResponseError,
    InvalidParameterError,
    InvalidTokenResponseError,
    InvalidURLError,
    ResponseParseError,
    TokenExchangeError,
    TokenRefreshError,
    TransportError,
)
from .http import RequestDescriptor, ResponseEnvelope, Transport, build_request_options
from .oauth import RedirectRequest, TokenResult

__version__ = "0.1.0"

__all__ = [
    # Client
    "GabAPIClient",
    "GabClientConfig",
    # Data
    "TokenResult",
    "RedirectRequest",
    "RequestDescriptor",
    "ResponseEnvelope",
    "Transport",
    "build_request_options",
    # Constants
    "Scope",
    "SCOPES",
    "VERSION",
    "REQUESTS_PER_MINUTE",
    "ACCEPTED_METHODS",
    # Exceptions
    "GabAPIError",
    "ConfigurationError",
    "InvalidParameterError",
    "InvalidURLError",
    "TransportError",
    "ResponseParseError",
    "HTMLResponseError",
    "AuthorizationError",
    "InvalidTokenResponseError",
    "TokenExchangeError",
    "TokenRefreshError",
]
