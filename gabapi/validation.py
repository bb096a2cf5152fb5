"""
Input validation utilities.

Predicates (is_*) answer a shape question; assertions (require_*) raise
InvalidParameterError naming the offending field and the expected shape.
Every public operation calls these before any request is made.
"""

import re
from collections.abc import Mapping
from typing import Any, Iterable
from urllib.parse import urlsplit, urlunsplit

from .constants import KNOWN_SCOPES, Scope
from .exceptions import InvalidParameterError, InvalidURLError

# Forbidden host code points; ":" is left out so bracketed IPv6 hosts pass
_INVALID_HOST_CHARS = re.compile(r"[\s\x00-\x1f\x7f#%/<>?@\[\\\]^|]")


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_string_empty(value: str) -> bool:
    """True for an empty or whitespace-only string."""
    return not value.strip()


def is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def is_object(value: Any) -> bool:
    return isinstance(value, Mapping)


def is_number(value: Any) -> bool:
    # bool is an int subclass but never a valid identifier or count
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def require_non_empty_string(value: Any, name: str) -> str:
    """
    Assert that a value is a non-empty string.

    Args:
        value: Value to check
        name: Field name used in the error message

    Returns:
        The value unchanged

    Raises:
        InvalidParameterError: If value is not a string or is empty
    """
    if not is_string(value) or is_string_empty(value):
        raise InvalidParameterError(
            f"{name} must be of type: str and greater than 0 characters, "
            f"got {value!r}"
        )
    return value


def require_array(value: Any, name: str) -> list:
    if not is_array(value):
        raise InvalidParameterError(
            f"{name} must be of type: list or tuple, got {type(value).__name__}"
        )
    return list(value)


def require_object(value: Any, name: str) -> dict:
    if not is_object(value):
        raise InvalidParameterError(
            f"{name} must be of type: mapping, got {type(value).__name__}"
        )
    return dict(value)


def require_identifier(value: Any, name: str) -> str:
    """
    Assert that a value is usable as a path identifier.

    Numeric ids (post ids, user ids) are converted to strings.

    Raises:
        InvalidParameterError: If value is neither a number nor a non-empty string
    """
    if is_number(value):
        value = str(value)
    return require_non_empty_string(value, name)


def require_scopes(scopes: Iterable[Any]) -> tuple:
    """
    Validate a scope sequence.

    Order is preserved and duplicates are kept. Each entry must be a known
    Gab scope, given either as a Scope member or as its string value.

    Returns:
        Tuple of scope strings

    Raises:
        InvalidParameterError: If scopes is not a list/tuple or holds an unknown scope
    """
    values = []
    for scope in require_array(scopes, "scopes"):
        if isinstance(scope, Scope):
            scope = scope.value
        if not is_string(scope) or scope not in KNOWN_SCOPES:
            raise InvalidParameterError(
                f"Unknown scope {scope!r}. Expected one of: {', '.join(sorted(KNOWN_SCOPES))}"
            )
        values.append(scope)
    return tuple(values)


def normalize_url(value: Any, name: str = "redirect_uri") -> str:
    """
    Parse and normalize an absolute URL.

    The scheme and host are lower-cased and an empty http(s) path becomes "/",
    so "http://www.example.com" normalizes to "http://www.example.com/".

    Args:
        value: URL string to normalize
        name: Field name used in the error message

    Returns:
        Normalized URL string

    Raises:
        InvalidURLError: If value does not parse as an absolute URL
    """
    if not is_string(value):
        raise InvalidURLError(f"Invalid URL: {value!r} ({name} must be a string)")

    try:
        parts = urlsplit(value.strip())
        # raises on a non-numeric or out-of-range port
        parts.port
    except ValueError as e:
        raise InvalidURLError(f"Invalid URL: {value}") from e

    if not parts.scheme or not parts.netloc or not parts.hostname:
        raise InvalidURLError(f"Invalid URL: {value}")
    if _INVALID_HOST_CHARS.search(parts.hostname):
        raise InvalidURLError(f"Invalid URL: {value}")

    scheme = parts.scheme.lower()
    path = parts.path
    if not path and scheme in ("http", "https"):
        path = "/"

    return urlunsplit((scheme, _lower_host(parts.netloc), path, parts.query, parts.fragment))


def _lower_host(netloc: str) -> str:
    """Lower-case the host of a netloc, leaving any userinfo untouched."""
    userinfo, sep, hostport = netloc.rpartition("@")
    return f"{userinfo}{sep}{hostport.lower()}"
