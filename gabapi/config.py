"""
Client configuration for the Gab.com API.

GabClientConfig is an immutable snapshot of the credentials and OAuth
settings a client uses. Changing a setting produces a new snapshot, so an
operation in flight keeps reading the values it started with.
"""

import os
import re
from dataclasses import dataclass, field, replace
from typing import Optional

from .exceptions import ConfigurationError
from .validation import normalize_url, require_non_empty_string, require_scopes


@dataclass(frozen=True)
class GabClientConfig:
    """
    Configuration for a Gab API client.

    Attributes:
        client_id: Gab application client ID
        secret: Gab application client secret
        redirect_uri: Absolute redirect URL registered for the application
                      (normalized on construction)
        scopes: Ordered scope strings requested from the user
        timeout: Socket timeout in seconds passed to requests (None = no timeout)
    """

    client_id: str
    secret: str
    redirect_uri: Optional[str] = None
    scopes: tuple = field(default_factory=tuple)
    timeout: Optional[float] = None

    def __post_init__(self) -> None:
        """Validate and normalize configuration after initialization."""
        require_non_empty_string(self.client_id, "client_id")
        require_non_empty_string(self.secret, "secret")

        # frozen dataclass: normalized values are written through object.__setattr__
        if self.redirect_uri is not None:
            object.__setattr__(self, "redirect_uri", normalize_url(self.redirect_uri))

        object.__setattr__(self, "scopes", require_scopes(self.scopes))

        if self.timeout is not None and self.timeout <= 0:
            raise ConfigurationError("timeout must be positive")

    def with_changes(self, **changes) -> "GabClientConfig":
        """
        Return a new validated configuration with the given fields replaced.

        Example:
            config = config.with_changes(scopes=["read", "write-post"])
        """
        return replace(self, **changes)

    def scopes_for_request(self) -> str:
        """Scopes rendered the way the OAuth endpoints expect them."""
        return " ".join(self.scopes)

    @classmethod
    def from_env(cls, prefix: str = "GAB_") -> "GabClientConfig":
        """
        Load configuration from environment variables.

        Required environment variables:
            GAB_CLIENT_ID: Gab application client ID
            GAB_CLIENT_SECRET: Gab application client secret

        Optional environment variables:
            GAB_REDIRECT_URI: Redirect URL registered for the application
            GAB_SCOPES: Scopes separated by commas or spaces (e.g. "read,write-post")
            GAB_TIMEOUT: Socket timeout in seconds

        Returns:
            GabClientConfig instance

        Raises:
            ConfigurationError: If required environment variables are missing
        """
        client_id = os.environ.get(f"{prefix}CLIENT_ID")
        secret = os.environ.get(f"{prefix}CLIENT_SECRET")

        if not client_id or not secret:
            raise ConfigurationError(
                "Missing Gab OAuth credentials. Set environment variables:\n"
                f"  {prefix}CLIENT_ID=your_client_id\n"
                f"  {prefix}CLIENT_SECRET=your_client_secret\n"
                "\n"
                "Register an application at: https://developers.gab.com"
            )

        raw_scopes = os.environ.get(f"{prefix}SCOPES", "")
        scopes = tuple(s for s in re.split(r"[,\s]+", raw_scopes) if s)

        timeout = os.environ.get(f"{prefix}TIMEOUT")
        try:
            timeout_value = float(timeout) if timeout else None
        except ValueError as e:
            raise ConfigurationError(f"{prefix}TIMEOUT must be a number, got {timeout!r}") from e

        return cls(
            client_id=client_id,
            secret=secret,
            redirect_uri=os.environ.get(f"{prefix}REDIRECT_URI") or None,
            scopes=scopes,
            timeout=timeout_value,
        )
