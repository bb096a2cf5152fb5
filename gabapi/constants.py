"""
Shared constants for the Gab.com API client.

This module centralizes the wire contract with the Gab API (hosts, version,
OAuth paths), the known scopes and the accepted HTTP methods.
"""

from enum import Enum

# =============================================================================
# Hosts and Versioning
# =============================================================================

HOST = "api.gab.com"
"""Host of the Gab.com API."""

PORT = 443
"""HTTPS port used for every request."""

BASE = f"https://{HOST}"
"""Base URL for the Gab.com API."""

VERSION = "1.0"
"""Active API version; every resource path is prefixed with /v{VERSION}."""

URI = f"{BASE}/v{VERSION}"
"""Versioned API root."""


# =============================================================================
# OAuth Endpoints
# =============================================================================

AUTHORIZATION_PATH = "/oauth/authorize"
"""Path of the page a user visits to grant scopes."""

AUTHORIZATION_URL = f"{BASE}{AUTHORIZATION_PATH}"
"""Fixed base of every authorization URL."""

TOKEN_PATH = "/oauth/token"
"""Token endpoint (not version-prefixed)."""


# =============================================================================
# Limits and Methods
# =============================================================================

REQUESTS_PER_MINUTE = 60
"""Documented request ceiling per minute. Informational only, not enforced."""

ACCEPTED_METHODS = ("GET", "POST", "DELETE")
"""HTTP methods accepted by the Gab.com API."""

HTML_DOCTYPE_MARKER = "<!doctype html"
"""Prefix (case-insensitive) of the HTML error page Gab returns for bad requests."""


# =============================================================================
# Scopes
# =============================================================================


class Scope(str, Enum):
    """Permissions an application may request on behalf of a user."""

    READ = "read"  # Read access to profile and feeds
    ENGAGE_USER = "engage-user"  # Follow or mute users
    ENGAGE_POST = "engage-post"  # Vote, repost, quote or report posts
    WRITE_POST = "write-post"  # Send new posts
    NOTIFICATIONS = "notifications"  # Access notifications


SCOPES = {
    "READ": Scope.READ.value,
    "ENGAGE_USER": Scope.ENGAGE_USER.value,
    "ENGAGE": Scope.ENGAGE_POST.value,
    "WRITE_POST": Scope.WRITE_POST.value,
    "NOTIFICATIONS": Scope.NOTIFICATIONS.value,
}
"""Scope values keyed by their constant names."""

KNOWN_SCOPES = frozenset(scope.value for scope in Scope)
