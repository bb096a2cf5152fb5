"""Calls on behalf of the authenticated user: profile, notifications, feed, posting."""

from datetime import datetime
from typing import Any, Mapping, Optional, Union

from .. import endpoints
from ..http.transport import ResponseEnvelope
from ..validation import is_string, require_object
from .base import ResourceGroup


class CurrentUser(ResourceGroup):
    def fetch(self, access_token: str) -> ResponseEnvelope:
        """Fetch the authenticated user's profile."""
        return self._call(endpoints.ME, access_token)

    def fetch_notifications(
        self, access_token: str, before_notification_id: Optional[Union[str, int]] = None
    ) -> ResponseEnvelope:
        """
        Fetch notifications, newest first.

        Args:
            access_token: User access token
            before_notification_id: Only return notifications older than this id
        """
        return self._call(
            endpoints.NOTIFICATIONS,
            access_token,
            query={"before": before_notification_id},
        )

    def fetch_feed(
        self, access_token: str, before_date: Optional[Union[str, datetime]] = None
    ) -> ResponseEnvelope:
        """
        Fetch the user's home feed.

        Args:
            access_token: User access token
            before_date: Only return items published before this date
        """
        return self._call(endpoints.FEED, access_token, query={"before": before_date})

    def create_post(
        self, access_token: str, post_options: Union[Mapping[str, Any], str]
    ) -> ResponseEnvelope:
        """
        Publish a new post.

        Args:
            access_token: User access token
            post_options: Post fields (e.g. {"body": "Hello"}) or a JSON string
        """
        if not is_string(post_options):
            post_options = require_object(post_options, "post_options")
        return self._call(endpoints.CREATE_POST, access_token, body=post_options)
