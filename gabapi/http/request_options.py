"""
Request descriptor construction.

build_request_options() turns (method, path, access token, optional body)
into the fully-qualified descriptor the Transport sends. It performs no I/O.
"""

import json
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional, Union
from urllib.parse import urlencode

from ..constants import ACCEPTED_METHODS, HOST, PORT, VERSION
from ..exceptions import InvalidParameterError
from ..validation import is_string, require_non_empty_string


@dataclass(frozen=True)
class RequestDescriptor:
    """
    One outbound request, constructed per call and discarded after use.

    Attributes:
        method: HTTP method (GET, POST or DELETE)
        path: Absolute path, version-prefixed for resource calls
        headers: Request headers
        host: API host
        port: API port
        body: UTF-8 encoded request body, if any
    """

    method: str
    path: str
    headers: Dict[str, str] = field(default_factory=dict)
    host: str = HOST
    port: int = PORT
    body: Optional[bytes] = None

    @property
    def url(self) -> str:
        netloc = self.host if self.port == 443 else f"{self.host}:{self.port}"
        return f"https://{netloc}{self.path}"


def encode_json_body(body: Union[str, Any]) -> bytes:
    """Serialize a body to UTF-8 JSON bytes (strings are sent as given)."""
    text = body if is_string(body) else json.dumps(body)
    return text.encode("utf-8")


def json_headers(payload: bytes) -> Dict[str, str]:
    # Content-Length counts bytes, not characters
    return {
        "Content-Type": "application/json",
        "Content-Length": str(len(payload)),
    }


def versioned_path(path: str) -> str:
    return f"/v{VERSION}{path}"


def with_query(path: str, **params: Any) -> str:
    """
    Append a query string, dropping None and empty values.

    datetime values are rendered in ISO 8601.

    Example:
        with_query("/feed", before="2019-01-01")  # "/feed?before=2019-01-01"
    """
    query = {}
    for key, value in params.items():
        if value is None or value == "":
            continue
        if isinstance(value, datetime):
            value = value.isoformat()
        query[key] = value

    if not query:
        return path
    return f"{path}?{urlencode(query)}"


def build_request_options(
    method: str,
    path: str,
    access_token: str,
    body: Any = None,
    versioned: bool = True,
) -> RequestDescriptor:
    """
    Build the descriptor for an authenticated API call.

    Args:
        method: HTTP method, any case (normalized to upper case)
        path: API path starting with "/" (e.g. "/me")
        access_token: User access token, sent as a Bearer token
        body: Optional request body; non-string bodies are JSON-serialized
        versioned: Prefix the path with the API version segment

    Returns:
        RequestDescriptor ready for Transport.send()

    Raises:
        InvalidParameterError: If the access token is missing, the method is
                               not accepted, or the path is not absolute
    """
    if not is_string(access_token) or not access_token.strip():
        raise InvalidParameterError(
            "You must set the access_token to a string in order to have any "
            "successful API calls."
        )

    method = require_non_empty_string(method, "method").upper()
    if method not in ACCEPTED_METHODS:
        raise InvalidParameterError(
            f"method must be one of {', '.join(ACCEPTED_METHODS)}, got {method!r}"
        )

    require_non_empty_string(path, "path")
    if not path.startswith("/"):
        raise InvalidParameterError(f"path must start with '/', got {path!r}")

    headers = {
        "Authorization": f"Bearer {access_token}",
        "Accept": "application/json",
    }

    payload = None
    if body is not None:
        payload = encode_json_body(body)
        headers.update(json_headers(payload))

    return RequestDescriptor(
        method=method,
        path=versioned_path(path) if versioned else path,
        headers=headers,
        host=HOST,
        port=PORT,
        body=payload,
    )
