"""
HTTP transport for the Gab.com API.

This module issues exactly one HTTP request per call and normalizes the
outcome into a ResponseEnvelope. It handles:

- Connection-level failures (raised as TransportError)
- HTML error pages returned instead of JSON (raised as HTMLResponseError)
- Invalid JSON bodies (raised as ResponseParseError)
- HTTP 4xx/5xx responses (returned as an envelope with success=False)

There are no retries, no rate limiting and no redirect following. Callers
that need these layer them on top.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Optional, Union

import requests

from ..constants import HTML_DOCTYPE_MARKER
from ..exceptions import HTMLResponseError, ResponseParseError, TransportError
from .request_options import RequestDescriptor

logger = logging.getLogger(__name__)

# Longest body excerpt kept on parse errors
BODY_EXCERPT_LENGTH = 500


@dataclass(frozen=True)
class ResponseEnvelope:
    """
    Uniform result of every network operation.

    Attributes:
        success: True iff 200 <= code < 300
        message: HTTP status line text (e.g. "Not Found")
        code: HTTP status code
        data: Parsed JSON body (None for an empty body)
    """

    success: bool
    message: str
    code: int
    data: Any = None

    @classmethod
    def from_status(cls, code: int, message: str, data: Any) -> "ResponseEnvelope":
        return cls(success=200 <= code < 300, message=message, code=code, data=data)

    def to_dict(self) -> dict:
        return {
            "success": self.success,
            "message": self.message,
            "code": self.code,
            "data": self.data,
        }


class Transport:
    """
    Sends RequestDescriptors over a shared requests.Session.

    Connection pooling and keep-alive are delegated to requests. The
    transport holds no per-request state, so one instance may serve
    concurrent calls from several threads.

    Example:
        transport = Transport()
        descriptor = build_request_options("GET", "/me", access_token)
        envelope = transport.send(descriptor)
        if envelope.success:
            print(envelope.data)
    """

    def __init__(
        self, session: Optional[requests.Session] = None, timeout: Optional[float] = None
    ):
        """
        Initialize transport.

        Args:
            session: requests session to use (creates one if not provided)
            timeout: Socket timeout in seconds (None waits indefinitely)
        """
        self._owns_session = session is None
        self.session = session or requests.Session()
        self.timeout = timeout

    def send(
        self, descriptor: RequestDescriptor, body: Union[str, bytes, None] = None
    ) -> ResponseEnvelope:
        """
        Issue one request and normalize its response.

        Args:
            descriptor: Request to send
            body: Optional body overriding descriptor.body

        Returns:
            ResponseEnvelope for any HTTP status

        Raises:
            TransportError: On connection-level failure
            HTMLResponseError: If the body is an HTML page
            ResponseParseError: If the body is not valid JSON
        """
        headers = dict(descriptor.headers)
        payload = descriptor.body
        if body is not None:
            payload = body.encode("utf-8") if isinstance(body, str) else body
            headers["Content-Type"] = "application/json"
            headers["Content-Length"] = str(len(payload))

        logger.debug(f"{descriptor.method} {descriptor.url}")

        try:
            response = self.session.request(
                descriptor.method,
                descriptor.url,
                headers=headers,
                data=payload,
                timeout=self.timeout,
                allow_redirects=False,
            )
        except requests.RequestException as e:
            logger.error(f"Request failed: {descriptor.method} {descriptor.path}: {e}")
            raise TransportError(
                f"Request to {descriptor.host} failed: {e}"
            ) from e

        data = self._parse_body(response)
        envelope = ResponseEnvelope.from_status(
            response.status_code, response.reason or "", data
        )

        if envelope.success:
            logger.debug(f"Response: {envelope.code}")
        else:
            logger.warning(
                f"API error ({envelope.code} {envelope.message}): "
                f"{descriptor.method} {descriptor.path}"
            )
        return envelope

    def _parse_body(self, response: requests.Response) -> Any:
        """
        Decode and parse a response body.

        Returns:
            Parsed JSON value, or None for an empty body
        """
        status = response.status_code
        try:
            text = response.content.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ResponseParseError(
                f"Response body is not valid UTF-8 (status {status})", status_code=status
            ) from e

        if not text.strip():
            return None

        excerpt = text[:BODY_EXCERPT_LENGTH]
        if text.lstrip().lower().startswith(HTML_DOCTYPE_MARKER):
            logger.warning(f"Received HTML page instead of JSON (status {status})")
            raise HTMLResponseError(
                "There was a problem with your request. The parameter(s) you gave "
                "are missing or incorrect.",
                status_code=status,
                body=excerpt,
            )

        try:
            return json.loads(text)
        except ValueError as e:
            logger.warning(f"Invalid JSON in response (status {status}): {e}")
            raise ResponseParseError(
                f"Invalid JSON in response (status {status}): {e}",
                status_code=status,
                body=excerpt,
            ) from e

    def close(self) -> None:
        """Close the session if this transport created it."""
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> "Transport":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
