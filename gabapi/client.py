"""
Gab.com API client.

This module provides the client applications use to authorize users and
call the Gab.com API on their behalf. It handles:

- Client credentials and OAuth settings (redirect URI, scopes)
- Authorization URL construction
- Authorization-code and refresh-token exchanges
- Authenticated resource calls returning ResponseEnvelopes

The client holds no token state: every exchange returns a TokenResult and
the caller owns storage, refresh timing and retries.
"""

import logging
from typing import Any, Optional, Sequence

from .config import GabClientConfig
from .constants import ACCEPTED_METHODS, REQUESTS_PER_MINUTE, SCOPES, VERSION
from .http.transport import Transport
from .oauth.authorization import build_authorization_url
from .oauth.token_exchanger import TokenExchanger
from .oauth.tokens import TokenResult
from .resources import CurrentUser, Groups, Popular, Posts, Users

logger = logging.getLogger(__name__)


class GabAPIClient:
    """
    Client for the Gab.com API.

    Settings are held in an immutable GabClientConfig. Setters replace the
    whole configuration, and each call reads the snapshot current when it
    starts.

    Example:
        from gabapi import GabAPIClient

        gab = GabAPIClient("client_id", "secret")
        gab.set_redirect_uri("https://example.com/oauth/callback")
        gab.set_scopes([GabAPIClient.SCOPES["READ"], GabAPIClient.SCOPES["WRITE_POST"]])

        # Send the user here, then exchange the code from the redirect
        url = gab.authorization_url
        token = gab.exchange_authorization_code(code)

        envelope = gab.current_user.fetch(token.access_token)
        if envelope.success:
            print(envelope.data["username"])
    """

    SCOPES = SCOPES
    VERSION = VERSION
    REQUESTS_PER_MINUTE = REQUESTS_PER_MINUTE
    ACCEPTED_METHODS = ACCEPTED_METHODS

    def __init__(
        self,
        client_id: str,
        secret: str,
        transport: Optional[Transport] = None,
        timeout: Optional[float] = None,
    ):
        """
        Initialize Gab API client.

        Args:
            client_id: Gab application client ID
            secret: Gab application client secret
            transport: Transport to send requests with (creates one if not provided)
            timeout: Socket timeout in seconds for a created transport

        Raises:
            InvalidParameterError: If client_id or secret is empty
        """
        self._config = GabClientConfig(client_id=client_id, secret=secret, timeout=timeout)
        self._owns_transport = transport is None
        self.transport = transport or Transport(timeout=timeout)
        self.token_exchanger = TokenExchanger(lambda: self._config, self.transport)

        self.current_user = CurrentUser(self.transport)
        self.users = Users(self.transport)
        self.popular = Popular(self.transport)
        self.posts = Posts(self.transport)
        self.groups = Groups(self.transport)

        logger.info("GabAPIClient initialized")

    @classmethod
    def from_config(
        cls, config: GabClientConfig, transport: Optional[Transport] = None
    ) -> "GabAPIClient":
        """Create a client from an existing configuration (e.g. GabClientConfig.from_env())."""
        client = cls(config.client_id, config.secret, transport=transport, timeout=config.timeout)
        client._config = config
        return client

    @property
    def config(self) -> GabClientConfig:
        return self._config

    # -- credentials -----------------------------------------------------------

    @property
    def client_id(self) -> str:
        return self._config.client_id

    @client_id.setter
    def client_id(self, client_id: str) -> None:
        self._config = self._config.with_changes(client_id=client_id)

    def set_client_id(self, client_id: str) -> "GabAPIClient":
        self.client_id = client_id
        return self

    @property
    def secret(self) -> str:
        return self._config.secret

    @secret.setter
    def secret(self, secret: str) -> None:
        self._config = self._config.with_changes(secret=secret)

    def set_secret(self, secret: str) -> "GabAPIClient":
        self.secret = secret
        return self

    # -- OAuth settings --------------------------------------------------------

    @property
    def redirect_uri(self) -> Optional[str]:
        """Normalized redirect URI (e.g. "http://www.example.com/")."""
        return self._config.redirect_uri

    @redirect_uri.setter
    def redirect_uri(self, redirect_uri: str) -> None:
        """
        Raises:
            InvalidURLError: If redirect_uri is not an absolute URL
        """
        self._config = self._config.with_changes(redirect_uri=redirect_uri)

    def set_redirect_uri(self, redirect_uri: str) -> "GabAPIClient":
        self.redirect_uri = redirect_uri
        return self

    @property
    def scopes(self) -> list:
        return list(self._config.scopes)

    @scopes.setter
    def scopes(self, scopes: Sequence[str]) -> None:
        """
        Raises:
            InvalidParameterError: If scopes is not a list/tuple of known scopes
        """
        self._config = self._config.with_changes(scopes=scopes)

    def set_scopes(self, scopes: Sequence[str]) -> "GabAPIClient":
        self.scopes = scopes
        return self

    def get_scopes_for_request(self) -> str:
        return self._config.scopes_for_request()

    @property
    def authorization_url(self) -> str:
        """
        URL the user visits to grant the configured scopes.

        Raises:
            InvalidParameterError: If redirect_uri or scopes are not set
        """
        config = self._config
        return build_authorization_url(config.client_id, config.redirect_uri, config.scopes)

    # -- token exchange --------------------------------------------------------

    def handle_authorization_redirect_request(self, request: Any) -> TokenResult:
        """
        Exchange the code carried by an authorization redirect request.

        Args:
            request: Inbound request exposing protocol, headers["host"] and url
                     (see RedirectRequest)

        Returns:
            TokenResult for the authorizing user
        """
        return self.token_exchanger.handle_authorization_redirect_request(request)

    def exchange_authorization_code(self, code: str) -> TokenResult:
        return self.token_exchanger.exchange_authorization_code(code)

    def refresh_access_token(self, refresh_token: str) -> TokenResult:
        """
        Obtain a new access token.

        The configured scopes are sent and must not exceed the original grant.
        """
        return self.token_exchanger.refresh_access_token(refresh_token)

    # -- lifecycle -------------------------------------------------------------

    def close(self) -> None:
        if self._owns_transport:
            self.transport.close()

    def __enter__(self) -> "GabAPIClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
