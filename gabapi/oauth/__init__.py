"""
OAuth 2.0 support for the Gab.com API.

Public API:
    build_authorization_url: Authorization URL for the code flow
    scopes_for_request: Space-joined scope rendering
    TokenExchanger: Authorization-code and refresh-token exchanges
    RedirectRequest: Minimal inbound redirect request
    TokenResult: Tokens returned by an exchange
    OAuthCallbackServer, run_authorization_flow: Local redirect receiver
"""

from .authorization import build_authorization_url, scopes_for_request
from .callback_server import AuthorizationResult, OAuthCallbackServer, run_authorization_flow
from .token_exchanger import RedirectRequest, TokenExchanger
from .tokens import TokenResult

__all__ = [
    "build_authorization_url",
    "scopes_for_request",
    "TokenExchanger",
    "RedirectRequest",
    "TokenResult",
    "AuthorizationResult",
    "OAuthCallbackServer",
    "run_authorization_flow",
]
