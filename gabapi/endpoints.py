"""
Gab.com API endpoint definitions.

Each endpoint is a (method, path template, scope) triple. Paths are relative
to the versioned API root and are prefixed with /v{VERSION} when sent. The
scope is the permission Gab requires for the call; the client documents it
but does not enforce it.

Documentation: https://developers.gab.com
"""

from typing import NamedTuple

from .constants import Scope


class Endpoint(NamedTuple):
    method: str
    path: str
    scope: Scope


# Current User Endpoints
ME = Endpoint("GET", "/me", Scope.READ)
NOTIFICATIONS = Endpoint("GET", "/notifications", Scope.NOTIFICATIONS)
FEED = Endpoint("GET", "/feed", Scope.READ)
CREATE_POST = Endpoint("POST", "/posts", Scope.WRITE_POST)

# User Endpoints
USER = Endpoint("GET", "/users/{username}", Scope.READ)
USER_FOLLOWERS = Endpoint("GET", "/users/{username}/followers", Scope.READ)
USER_FOLLOWING = Endpoint("GET", "/users/{username}/following", Scope.READ)
USER_FEED = Endpoint("GET", "/users/{username}/feed", Scope.READ)
FOLLOW_USER = Endpoint("POST", "/users/{user_id}/follow", Scope.ENGAGE_USER)
UNFOLLOW_USER = Endpoint("DELETE", "/users/{user_id}/follow", Scope.ENGAGE_USER)

# Popular Endpoints
POPULAR_FEED = Endpoint("GET", "/popular/feed/", Scope.READ)
POPULAR_USERS = Endpoint("GET", "/popular/users/", Scope.READ)

# Post Endpoints
POST_DETAILS = Endpoint("GET", "/posts/{post_id}", Scope.READ)
UPVOTE_POST = Endpoint("POST", "/posts/{post_id}/upvote", Scope.ENGAGE_POST)
REMOVE_UPVOTE_POST = Endpoint("DELETE", "/posts/{post_id}/upvote", Scope.ENGAGE_POST)
DOWNVOTE_POST = Endpoint("POST", "/posts/{post_id}/downvote", Scope.ENGAGE_POST)
REMOVE_DOWNVOTE_POST = Endpoint("DELETE", "/posts/{post_id}/downvote", Scope.ENGAGE_POST)
REPOST_POST = Endpoint("POST", "/posts/{post_id}/repost", Scope.ENGAGE_POST)
REMOVE_REPOST_POST = Endpoint("DELETE", "/posts/{post_id}/repost", Scope.ENGAGE_POST)

# Group Endpoints
GROUPS = Endpoint("GET", "/groups", Scope.READ)
GROUP_DETAILS = Endpoint("GET", "/groups/{group_id}", Scope.READ)
GROUP_USERS = Endpoint("GET", "/groups/{group_id}/users", Scope.READ)
GROUP_MODERATION_LOGS = Endpoint("GET", "/groups/{group_id}/moderation-logs", Scope.READ)
