"""
Token results returned by the Gab OAuth token endpoint.

The client holds no token state between calls: every successful exchange
produces a fresh TokenResult and the caller owns its persistence.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Mapping, Optional

from ..exceptions import InvalidTokenResponseError
from ..validation import is_number, is_object, is_string, is_string_empty

MAX_EXPIRES_IN = 10 * 365 * 24 * 60 * 60
"""Longest access token lifetime accepted from the token endpoint (ten years)."""


@dataclass
class TokenResult:
    """
    Tokens obtained from an authorization-code or refresh-token exchange.

    Attributes:
        access_token: Short-lived token for API calls
        refresh_token: Long-lived token for obtaining new access tokens
        expires_in: Access token lifetime in seconds, as returned by Gab
        expiration_date: When the access token expires (timezone-aware UTC)
    """

    access_token: str
    refresh_token: str
    expires_in: int
    expiration_date: datetime

    @property
    def is_expired(self) -> bool:
        return datetime.now(timezone.utc) >= self.expiration_date

    def expires_within(self, seconds: int) -> bool:
        """
        Check if the access token expires within the given seconds.

        Useful for refreshing ahead of expiry (e.g. within 5 minutes).
        """
        buffer_time = datetime.now(timezone.utc) + timedelta(seconds=seconds)
        return buffer_time >= self.expiration_date

    def to_dict(self) -> dict:
        """Convert to a JSON-serializable dictionary."""
        return {
            "access_token": self.access_token,
            "refresh_token": self.refresh_token,
            "expires_in": self.expires_in,
            "expiration_date": self.expiration_date.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "TokenResult":
        """
        Create a TokenResult from a dictionary produced by to_dict().

        Raises:
            KeyError: If required fields are missing
        """
        expiration = datetime.fromisoformat(data["expiration_date"])
        if expiration.tzinfo is None:
            expiration = expiration.replace(tzinfo=timezone.utc)
        return cls(
            access_token=data["access_token"],
            refresh_token=data["refresh_token"],
            expires_in=int(data["expires_in"]),
            expiration_date=expiration,
        )

    @classmethod
    def from_response(
        cls,
        data: Any,
        now: Optional[datetime] = None,
        fallback_refresh_token: Optional[str] = None,
    ) -> "TokenResult":
        """
        Build a TokenResult from a token endpoint payload.

        Args:
            data: Parsed JSON body ({expires_in, access_token, refresh_token})
            now: Issue time (defaults to the current UTC time)
            fallback_refresh_token: Refresh token to keep when the payload
                                    does not rotate it

        Returns:
            TokenResult with expiration_date = now + expires_in

        Raises:
            InvalidTokenResponseError: If the payload is not a mapping or is
                                       missing token fields, or expires_in is out of range
        """
        if not is_object(data):
            raise InvalidTokenResponseError(
                f"Token response must be a JSON object, got {type(data).__name__}"
            )

        access_token = data.get("access_token")
        if not is_string(access_token) or is_string_empty(access_token):
            raise InvalidTokenResponseError("Token response is missing access_token")

        expires_in = data.get("expires_in")
        if not is_number(expires_in):
            raise InvalidTokenResponseError("Token response is missing expires_in")
        # NaN and infinity fail the range comparison too
        if not 0 <= expires_in <= MAX_EXPIRES_IN:
            raise InvalidTokenResponseError(
                f"Token response has an invalid expires_in: {expires_in!r}"
            )

        refresh_token = _get_refresh_token(data, fallback_refresh_token)

        issued = now or datetime.now(timezone.utc)
        return cls(
            access_token=access_token,
            refresh_token=refresh_token,
            expires_in=int(expires_in),
            expiration_date=issued + timedelta(seconds=expires_in),
        )


def _get_refresh_token(data: Mapping, fallback: Optional[str]) -> str:
    refresh_token = data.get("refresh_token")
    if is_string(refresh_token) and not is_string_empty(refresh_token):
        return refresh_token
    if fallback:
        return fallback
    raise InvalidTokenResponseError("Token response is missing refresh_token")
