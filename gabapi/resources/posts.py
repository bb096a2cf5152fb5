"""Post details, votes and reposts."""

from typing import Union

from .. import endpoints
from ..http.transport import ResponseEnvelope
from .base import ResourceGroup

PostId = Union[str, int]


class Posts(ResourceGroup):
    """
    Engagement calls on a single post.

    Every vote and repost call has a matching remove_* call issuing DELETE
    on the same path.
    """

    def fetch_post_details(self, access_token: str, post_id: PostId) -> ResponseEnvelope:
        return self._call(endpoints.POST_DETAILS, access_token, post_id=post_id)

    def upvote_post(self, access_token: str, post_id: PostId) -> ResponseEnvelope:
        return self._call(endpoints.UPVOTE_POST, access_token, post_id=post_id)

    def remove_upvote_post(self, access_token: str, post_id: PostId) -> ResponseEnvelope:
        return self._call(endpoints.REMOVE_UPVOTE_POST, access_token, post_id=post_id)

    def downvote_post(self, access_token: str, post_id: PostId) -> ResponseEnvelope:
        return self._call(endpoints.DOWNVOTE_POST, access_token, post_id=post_id)

    def remove_downvote_post(self, access_token: str, post_id: PostId) -> ResponseEnvelope:
        return self._call(endpoints.REMOVE_DOWNVOTE_POST, access_token, post_id=post_id)

    def repost_post(self, access_token: str, post_id: PostId) -> ResponseEnvelope:
        return self._call(endpoints.REPOST_POST, access_token, post_id=post_id)

    def remove_repost_post(self, access_token: str, post_id: PostId) -> ResponseEnvelope:
        return self._call(endpoints.REMOVE_REPOST_POST, access_token, post_id=post_id)
