"""Popular feed and users."""

from .. import endpoints
from ..http.transport import ResponseEnvelope
from .base import ResourceGroup


class Popular(ResourceGroup):
    def fetch_popular_feed(self, access_token: str) -> ResponseEnvelope:
        return self._call(endpoints.POPULAR_FEED, access_token)

    def fetch_popular_users(self, access_token: str) -> ResponseEnvelope:
        return self._call(endpoints.POPULAR_USERS, access_token)
