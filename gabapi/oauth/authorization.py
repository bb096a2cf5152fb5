"""Authorization URL construction for the Gab OAuth 2.0 code flow."""

import logging
from typing import Sequence
from urllib.parse import quote, urlencode

from ..constants import AUTHORIZATION_URL
from ..exceptions import InvalidParameterError
from ..validation import is_string_empty, require_non_empty_string, require_scopes

logger = logging.getLogger(__name__)


def scopes_for_request(scopes: Sequence[str]) -> str:
    """
    Render scopes as the single space-joined string OAuth expects.

    Order is preserved and duplicates are not removed.

    Example:
        scopes_for_request(["read", "write-post"])  # "read write-post"
    """
    return " ".join(require_scopes(scopes))


def build_authorization_url(client_id: str, redirect_uri: str, scopes: Sequence[str]) -> str:
    """
    Build the URL a user visits to grant scopes to the application.

    This is a pure function: redirecting the user to the URL is the
    caller's responsibility.

    Args:
        client_id: Gab application client ID
        redirect_uri: Normalized absolute redirect URL
        scopes: Non-empty scope sequence

    Returns:
        Percent-encoded authorization URL

    Raises:
        InvalidParameterError: If any argument is missing or empty
    """
    require_non_empty_string(client_id, "client_id")
    if redirect_uri is None:
        raise InvalidParameterError(
            "You must set the redirect_uri in order to receive a valid authorization URL."
        )
    require_non_empty_string(redirect_uri, "redirect_uri")

    scope = scopes_for_request(scopes)
    if is_string_empty(scope):
        raise InvalidParameterError(
            "You must set the scopes in order to receive a valid authorization URL."
        )

    params = {
        "response_type": "code",
        "client_id": client_id,
        "redirect_uri": redirect_uri,
        "scope": scope,
    }
    url = f"{AUTHORIZATION_URL}?{urlencode(params, quote_via=quote)}"
    logger.debug(f"Generated authorization URL: {url}")
    return url
