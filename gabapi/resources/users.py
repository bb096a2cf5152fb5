"""User lookups, follower lists and follow/unfollow."""

from datetime import datetime
from typing import Optional, Union

from .. import endpoints
from ..http.transport import ResponseEnvelope
from .base import ResourceGroup


class Users(ResourceGroup):
    def fetch_user(self, access_token: str, username: str) -> ResponseEnvelope:
        return self._call(endpoints.USER, access_token, username=username)

    def fetch_user_followers(
        self, access_token: str, username: str, before_count: Optional[int] = None
    ) -> ResponseEnvelope:
        """
        Fetch a user's followers.

        Args:
            access_token: User access token
            username: Gab username
            before_count: Pagination cursor returned by the previous page
        """
        return self._call(
            endpoints.USER_FOLLOWERS,
            access_token,
            query={"before": before_count},
            username=username,
        )

    def fetch_user_following(
        self, access_token: str, username: str, before_count: Optional[int] = None
    ) -> ResponseEnvelope:
        """Fetch the accounts a user follows (paginated like fetch_user_followers)."""
        return self._call(
            endpoints.USER_FOLLOWING,
            access_token,
            query={"before": before_count},
            username=username,
        )

    def fetch_user_feed(
        self,
        access_token: str,
        username: str,
        before_date: Optional[Union[str, datetime]] = None,
    ) -> ResponseEnvelope:
        return self._call(
            endpoints.USER_FEED,
            access_token,
            query={"before": before_date},
            username=username,
        )

    def follow_user(self, access_token: str, user_id: Union[str, int]) -> ResponseEnvelope:
        return self._call(endpoints.FOLLOW_USER, access_token, user_id=user_id)

    def unfollow_user(self, access_token: str, user_id: Union[str, int]) -> ResponseEnvelope:
        return self._call(endpoints.UNFOLLOW_USER, access_token, user_id=user_id)
