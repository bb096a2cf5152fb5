"""
Token exchange for the Gab OAuth 2.0 flows.

This module performs the two token-acquisition flows:
- Authorization code -> access/refresh tokens (once per user consent)
- Refresh token -> new access token

Both POST a JSON body to the token endpoint through the Transport and turn
the response into a TokenResult. A non-2xx answer or a malformed payload
raises instead of producing a partially populated result.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Optional
from urllib.parse import parse_qs, urlsplit

from ..config import GabClientConfig
from ..constants import HOST, PORT, TOKEN_PATH
from ..exceptions import (
    AuthorizationError,
    InvalidParameterError,
    InvalidTokenResponseError,
    TokenExchangeError,
    TokenRefreshError,
)
from ..http.request_options import RequestDescriptor, encode_json_body, json_headers
from ..http.transport import ResponseEnvelope, Transport
from ..validation import is_string_empty, require_non_empty_string
from .authorization import scopes_for_request
from .tokens import TokenResult

logger = logging.getLogger(__name__)


@dataclass
class RedirectRequest:
    """
    Minimal inbound redirect request.

    Any object exposing the same attributes works (protocol or scheme,
    headers with a host entry, url), including framework request objects.

    Attributes:
        url: Request path with query string (or an absolute URL)
        headers: Request headers; only "host" is read
        protocol: "http" or "https"
    """

    url: str
    headers: Mapping[str, str] = field(default_factory=dict)
    protocol: str = "http"


class TokenExchanger:
    """
    Exchanges authorization codes and refresh tokens for TokenResults.

    The exchanger reads the current configuration through config_provider
    at the start of each call and keeps no token state of its own.
    """

    def __init__(self, config_provider: Callable[[], GabClientConfig], transport: Transport):
        """
        Initialize token exchanger.

        Args:
            config_provider: Returns the configuration snapshot to use
            transport: Transport used for the token endpoint
        """
        self._config_provider = config_provider
        self.transport = transport

    def exchange_authorization_code(self, code: str) -> TokenResult:
        """
        Exchange an authorization code for access and refresh tokens.

        Args:
            code: Code received on the authorization redirect

        Returns:
            TokenResult with fresh tokens

        Raises:
            InvalidParameterError: If code is empty or redirect_uri is not set
            TokenExchangeError: If the token endpoint rejects the exchange or
                                returns a malformed payload
            TransportError: On connection failure
            ResponseParseError: If the token endpoint answers with non-JSON
        """
        require_non_empty_string(code, "code")
        config = self._config_provider()
        if not config.redirect_uri:
            raise InvalidParameterError(
                "You must set the redirect_uri before exchanging an authorization code."
            )

        logger.info("Exchanging authorization code for tokens")

        envelope = self._post_token_request(
            {
                "code": code,
                "grant_type": "authorization_code",
                "client_id": config.client_id,
                "redirect_uri": config.redirect_uri,
                "client_secret": config.secret,
            }
        )

        if not envelope.success:
            logger.error(f"Token exchange failed: {envelope.code} - {envelope.data}")
            raise TokenExchangeError(
                f"Token exchange failed with status {envelope.code}. "
                f"Check that your client_id, secret and redirect_uri are correct.",
                response=envelope,
            )

        try:
            token = TokenResult.from_response(envelope.data)
        except InvalidTokenResponseError as e:
            logger.error(f"Invalid response from token endpoint: {e}")
            raise TokenExchangeError(
                f"Invalid response from token endpoint: {e}", response=envelope
            ) from e

        logger.info("Successfully obtained tokens")
        return token

    def refresh_access_token(self, refresh_token: str) -> TokenResult:
        """
        Obtain a new access token using a refresh token.

        The currently configured scopes are sent with the request. Gab only
        accepts scopes equal to or narrower than the original grant; keeping
        them within that bound is the caller's responsibility.

        Args:
            refresh_token: Refresh token from a previous exchange

        Returns:
            TokenResult with a fresh access token (the refresh token is kept
            when the endpoint does not rotate it)

        Raises:
            InvalidParameterError: If refresh_token is empty or no scopes are set
            TokenRefreshError: If the token endpoint rejects the refresh or
                               returns a malformed payload
            TransportError: On connection failure
            ResponseParseError: If the token endpoint answers with non-JSON
        """
        require_non_empty_string(refresh_token, "refresh_token")
        config = self._config_provider()
        scope = scopes_for_request(config.scopes)
        if is_string_empty(scope):
            raise InvalidParameterError(
                "You must set the scopes in order to refresh an access token."
            )

        logger.info("Refreshing access token")

        envelope = self._post_token_request(
            {
                "refresh_token": refresh_token,
                "grant_type": "refresh_token",
                "client_secret": config.secret,
                "client_id": config.client_id,
                "scope": scope,
            }
        )

        if not envelope.success:
            logger.error(f"Token refresh failed: {envelope.code} - {envelope.data}")
            raise TokenRefreshError(
                f"Token refresh failed with status {envelope.code}. "
                f"Your refresh token may have expired or the requested scopes "
                f"exceed the original grant.",
                response=envelope,
            )

        try:
            token = TokenResult.from_response(
                envelope.data, fallback_refresh_token=refresh_token
            )
        except InvalidTokenResponseError as e:
            logger.error(f"Invalid response from token endpoint: {e}")
            raise TokenRefreshError(
                f"Invalid response from token endpoint: {e}", response=envelope
            ) from e

        logger.info("Successfully refreshed tokens")
        return token

    def handle_authorization_redirect_request(self, request: Any) -> TokenResult:
        """
        Extract the code from an authorization redirect and exchange it.

        Args:
            request: Inbound request exposing protocol (or scheme),
                     headers["host"] and url

        Returns:
            TokenResult with fresh tokens

        Raises:
            InvalidParameterError: If the request is missing or has no URL
            AuthorizationError: If the redirect carries an OAuth error or no code
            TokenExchangeError: If the code exchange fails
        """
        if request is None:
            raise InvalidParameterError("request must be provided")

        query = parse_qs(urlsplit(redirect_url(request)).query)

        error = _first(query, "error")
        if error:
            description = _first(query, "error_description") or "Unknown error"
            logger.error(f"OAuth error: {error} - {description}")
            raise AuthorizationError(
                f"Authorization failed: {error} - {description}",
                error=error,
                error_description=description,
            )

        code = _first(query, "code")
        if not code:
            logger.error("No authorization code in redirect")
            raise AuthorizationError(
                "No authorization code received",
                error="missing_code",
                error_description="No authorization code received",
            )

        logger.info("Authorization code received")
        return self.exchange_authorization_code(code)

    def _post_token_request(self, payload: dict) -> ResponseEnvelope:
        body = encode_json_body(payload)
        headers = {"Accept": "application/json"}
        headers.update(json_headers(body))

        descriptor = RequestDescriptor(
            method="POST",
            path=TOKEN_PATH,
            headers=headers,
            host=HOST,
            port=PORT,
            body=body,
        )
        return self.transport.send(descriptor)


def redirect_url(request: Any) -> str:
    """
    Reconstruct the absolute URL of an inbound redirect request.

    Raises:
        InvalidParameterError: If the request has no url, or a relative url
                               and no host header
    """
    url = getattr(request, "url", None)
    require_non_empty_string(url, "request.url")

    if urlsplit(url).netloc:
        return url

    host = _header(getattr(request, "headers", None) or {}, "host")
    if not host:
        raise InvalidParameterError("request.headers must include host for a relative url")

    protocol = getattr(request, "protocol", None) or getattr(request, "scheme", None) or "http"
    return f"{protocol.rstrip(':')}://{host}{url}"


def _header(headers: Mapping[str, str], name: str) -> Optional[str]:
    value = headers.get(name)
    if value:
        return value
    for key, value in headers.items():
        if key.lower() == name:
            return value
    return None


def _first(query: dict, name: str) -> Optional[str]:
    values = query.get(name)
    return values[0] if values else None
