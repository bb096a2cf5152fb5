"""Shared pytest fixtures for Gab API client tests.

Network calls are never made: tests hand the Transport a mocked
requests.Session whose request() returns canned requests.Response objects.
"""

import json
from typing import Any, Optional
from unittest import mock

import pytest
import requests

from gabapi.http.transport import Transport


def build_response(
    status_code: int = 200,
    body: Any = None,
    reason: Optional[str] = None,
    raw: Optional[bytes] = None,
) -> requests.Response:
    """Create a requests.Response with the given status and body.

    Args:
        status_code: HTTP status code
        body: Value serialized as the JSON body (ignored when raw is given)
        reason: Status line text (defaults to a common phrase for the code)
        raw: Exact body bytes
    """
    response = requests.Response()
    response.status_code = status_code
    response.reason = reason or {
        200: "OK",
        201: "Created",
        204: "No Content",
        400: "Bad Request",
        401: "Unauthorized",
        404: "Not Found",
        500: "Internal Server Error",
    }.get(status_code, "")
    if raw is not None:
        response._content = raw
    elif body is None:
        response._content = b""
    else:
        response._content = json.dumps(body).encode("utf-8")
    return response


@pytest.fixture
def make_response():
    """Factory for canned requests.Response objects (see build_response)."""
    return build_response


@pytest.fixture
def mock_session():
    """Mocked requests.Session answering 200 {} by default."""
    session = mock.Mock(spec=requests.Session)
    session.request.return_value = build_response(200, {})
    return session


@pytest.fixture
def transport(mock_session):
    """Transport bound to the mocked session."""
    return Transport(session=mock_session)
