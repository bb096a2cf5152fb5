"""
Exception classes for the Gab.com API client.

This module defines the exception hierarchy for every failure the client
can raise. Precondition and URL errors are programmer errors and are raised
before any request is made. Transport and parse errors are raised from the
network call itself. HTTP errors returned by the API on resource calls are
NOT exceptions; they come back as a ResponseEnvelope with success=False.
"""

from typing import Optional


class GabAPIError(Exception):
    """Base exception for all Gab API client errors."""

    pass


class ConfigurationError(GabAPIError):
    """Client configuration error (missing credentials in the environment)."""

    pass


class InvalidParameterError(GabAPIError, ValueError):
    """A required parameter is missing, empty, or has the wrong shape."""

    pass


class InvalidURLError(GabAPIError, ValueError):
    """A URL (typically the redirect URI) is not an absolute URL."""

    pass


class TransportError(GabAPIError):
    """Connection-level failure (DNS, TLS, connection reset)."""

    pass


class ResponseParseError(GabAPIError):
    """
    Response body could not be parsed as JSON.

    Attributes:
        status_code: HTTP status of the response that failed to parse
        body: Decoded response text (may be truncated)
    """

    def __init__(
        self, message: str, status_code: Optional[int] = None, body: Optional[str] = None
    ):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class HTMLResponseError(ResponseParseError):
    """
    Upstream returned an HTML page instead of JSON.

    Gab answers malformed requests (missing or incorrect parameters)
    with an HTML error page.
    """

    pass


class AuthorizationError(GabAPIError):
    """OAuth authorization redirect carried an error or no code."""

    def __init__(
        self,
        message: str,
        error: Optional[str] = None,
        error_description: Optional[str] = None,
    ):
        super().__init__(message)
        self.error = error
        self.error_description = error_description


class InvalidTokenResponseError(GabAPIError):
    """Token endpoint answered 2xx but the payload is missing token fields."""

    pass


class TokenExchangeError(GabAPIError):
    """
    Failed to exchange an authorization code for tokens.

    Attributes:
        response: ResponseEnvelope returned by the token endpoint, if any
    """

    def __init__(self, message: str, response=None):
        super().__init__(message)
        self.response = response


class TokenRefreshError(GabAPIError):
    """
    Failed to refresh an access token using a refresh token.

    Attributes:
        response: ResponseEnvelope returned by the token endpoint, if any
    """

    def __init__(self, message: str, response=None):
        super().__init__(message)
        self.response = response
