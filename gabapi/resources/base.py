"""Shared dispatch for the resource groups."""

import logging
from typing import Any, Dict, Optional
from urllib.parse import quote

from ..endpoints import Endpoint
from ..http.request_options import build_request_options, with_query
from ..http.transport import ResponseEnvelope, Transport
from ..validation import require_identifier

logger = logging.getLogger(__name__)


class ResourceGroup:
    """
    Base class for a group of Gab API calls sharing one Transport.

    Subclasses expose one method per endpoint; each is a single _call().
    """

    def __init__(self, transport: Transport):
        self.transport = transport

    def _call(
        self,
        endpoint: Endpoint,
        access_token: str,
        body: Any = None,
        query: Optional[Dict[str, Any]] = None,
        **path_params: Any,
    ) -> ResponseEnvelope:
        """
        Build and send one request for an endpoint.

        Args:
            endpoint: Endpoint definition
            access_token: User access token
            body: Optional JSON body
            query: Optional query parameters (None values are dropped)
            **path_params: Values for the endpoint's path template

        Returns:
            ResponseEnvelope from the Transport
        """
        params = {
            name: quote(require_identifier(value, name), safe="")
            for name, value in path_params.items()
        }
        path = with_query(endpoint.path.format(**params), **(query or {}))

        logger.debug(f"Calling {endpoint.method} {path} (scope: {endpoint.scope.value})")
        descriptor = build_request_options(endpoint.method, path, access_token, body)
        return self.transport.send(descriptor)
