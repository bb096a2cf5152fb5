"""Groups: listing, details, members and moderation logs."""

from typing import Optional

from .. import endpoints
from ..http.transport import ResponseEnvelope
from .base import ResourceGroup


class Groups(ResourceGroup):
    def fetch_groups(self, access_token: str) -> ResponseEnvelope:
        return self._call(endpoints.GROUPS, access_token)

    def fetch_group_details(self, access_token: str, group_id: str) -> ResponseEnvelope:
        return self._call(endpoints.GROUP_DETAILS, access_token, group_id=group_id)

    def get_group_users(
        self, access_token: str, group_id: str, before_count: Optional[int] = None
    ) -> ResponseEnvelope:
        """
        Fetch the members of a group.

        Args:
            access_token: User access token
            group_id: Group identifier
            before_count: Pagination cursor returned by the previous page
        """
        return self._call(
            endpoints.GROUP_USERS,
            access_token,
            query={"before": before_count},
            group_id=group_id,
        )

    def get_group_moderation_logs(self, access_token: str, group_id: str) -> ResponseEnvelope:
        return self._call(endpoints.GROUP_MODERATION_LOGS, access_token, group_id=group_id)
