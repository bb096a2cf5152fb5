"""Resource groups built on the shared Transport."""

from .base import ResourceGroup
from .current_user import CurrentUser
from .groups import Groups
from .popular import Popular
from .posts import Posts
from .users import Users

__all__ = [
    "ResourceGroup",
    "CurrentUser",
    "Users",
    "Popular",
    "Posts",
    "Groups",
]
