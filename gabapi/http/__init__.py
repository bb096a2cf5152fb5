"""HTTP layer: request descriptors and the transport that sends them."""

from .request_options import RequestDescriptor, build_request_options, with_query
from .transport import ResponseEnvelope, Transport

__all__ = [
    "RequestDescriptor",
    "build_request_options",
    "with_query",
    "ResponseEnvelope",
    "Transport",
]
