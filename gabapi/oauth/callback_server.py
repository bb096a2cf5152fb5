"""
OAuth callback server for the Gab authorization flow.

This module provides a small local server that receives the authorization
redirect, exchanges the code through a GabAPIClient and hands the resulting
TokenResult back to the caller. It is meant for scripts and personal use:
it runs during the authorization flow and stops after one callback.
"""

import html
import logging
import sys
import threading
import time
import webbrowser
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from flask import Flask, Response, request

from ..exceptions import AuthorizationError, GabAPIError
from .token_exchanger import RedirectRequest
from .tokens import TokenResult

if TYPE_CHECKING:
    from ..client import GabAPIClient

logger = logging.getLogger(__name__)

PAGE_TEMPLATE = """<html>
<head><title>{title}</title></head>
<body style="font-family: Arial, sans-serif; max-width: 600px; margin: 50px auto; padding: 20px;">
    <h1 style="color: {color};">{title}</h1>
    <p>{message}</p>
    <p style="margin-top: 30px; color: #666;">You can close this window.</p>
</body>
</html>"""


@dataclass
class AuthorizationResult:
    """
    Result of the OAuth authorization flow.

    Attributes:
        success: Whether authorization and token exchange succeeded
        token: Tokens obtained for the user (if successful)
        error: Error code (if failed)
        error_description: Human-readable error description (if failed)
    """

    success: bool
    token: Optional[TokenResult] = None
    error: Optional[str] = None
    error_description: Optional[str] = None


class OAuthCallbackServer:
    """
    Local server handling the Gab authorization redirect.

    The server:
    1. Listens on the configured host/port (plain HTTP unless ssl_context is given)
    2. Receives the redirect on callback path
    3. Exchanges the code for tokens through the client
    4. Signals wait_for_callback() with the result
    """

    def __init__(
        self,
        client: "GabAPIClient",
        host: str = "localhost",
        port: int = 8080,
        path: str = "/oauth/callback",
        ssl_context=None,
    ):
        """
        Initialize callback server.

        Args:
            client: Client used to exchange the code
            host: Interface to bind
            port: Port to bind
            path: Callback path (must match the client's redirect URI)
            ssl_context: Optional SSL context or (cert, key) tuple passed to Flask
        """
        self.client = client
        self.host = host
        self.port = port
        self.path = path
        self.ssl_context = ssl_context
        self.app = Flask(__name__)
        self.app.logger.setLevel(logging.WARNING)
        self.server: Optional[threading.Thread] = None
        self.result: Optional[AuthorizationResult] = None
        self._shutdown_event = threading.Event()

        self.app.add_url_rule(path, "oauth_callback", self._handle_callback, methods=["GET"])

    @property
    def callback_url(self) -> str:
        scheme = "https" if self.ssl_context else "http"
        return f"{scheme}://{self.host}:{self.port}{self.path}"

    def _handle_callback(self) -> Response:
        """Handle the authorization redirect from Gab."""
        logger.info("Received OAuth callback")

        redirect = RedirectRequest(
            url=request.full_path,
            headers={"host": request.host},
            protocol=request.scheme,
        )

        try:
            token = self.client.handle_authorization_redirect_request(redirect)
        except AuthorizationError as e:
            self.result = AuthorizationResult(
                success=False, error=e.error, error_description=e.error_description
            )
            self._shutdown_event.set()
            return self._page("Authorization Failed", str(e), status=400)
        except GabAPIError as e:
            logger.error(f"Token exchange failed: {e}")
            self.result = AuthorizationResult(
                success=False, error="token_exchange_failed", error_description=str(e)
            )
            self._shutdown_event.set()
            return self._page("Authorization Failed", str(e), status=400)

        logger.info("Authorization completed successfully")
        self.result = AuthorizationResult(success=True, token=token)
        self._shutdown_event.set()
        return self._page(
            "Authorization Successful",
            "Your application has been authorized to access your Gab account.",
            status=200,
        )

    @staticmethod
    def _page(title: str, message: str, status: int) -> Response:
        color = "#4caf50" if status == 200 else "#d32f2f"
        body = PAGE_TEMPLATE.format(title=title, color=color, message=html.escape(message))
        return Response(body, status=status, content_type="text/html")

    def start(self) -> None:
        """Start the callback server in a background thread."""
        logger.info(f"Starting OAuth callback server on {self.callback_url}")

        def run_server():
            try:
                self.app.run(
                    host=self.host,
                    port=self.port,
                    ssl_context=self.ssl_context,
                    debug=False,
                    use_reloader=False,
                    threaded=True,
                )
            except Exception as e:
                logger.error(f"Server error: {e}")
                self.result = AuthorizationResult(
                    success=False,
                    error="server_error",
                    error_description=f"Server failed to start: {e}",
                )
                self._shutdown_event.set()

        self.server = threading.Thread(target=run_server, daemon=True)
        self.server.start()

        # Give server a moment to bind
        time.sleep(1)

    def wait_for_callback(self, timeout: int = 300) -> AuthorizationResult:
        """
        Wait for the OAuth callback.

        Args:
            timeout: Maximum seconds to wait (default: 300 = 5 minutes)

        Returns:
            AuthorizationResult with tokens or error
        """
        logger.info(f"Waiting for OAuth callback (timeout: {timeout}s)")

        if self._shutdown_event.wait(timeout=timeout):
            return self.result or AuthorizationResult(
                success=False,
                error="unknown",
                error_description="Server shutdown without result",
            )

        logger.warning(f"Timeout waiting for callback after {timeout}s")
        return AuthorizationResult(
            success=False,
            error="timeout",
            error_description=f"No callback received within {timeout} seconds.",
        )

    def stop(self) -> None:
        """
        Stop waiting for the callback.

        Flask's development server has no graceful shutdown; the daemon
        thread ends with the main program.
        """
        if self.server:
            logger.info("OAuth callback server shutting down")
            self._shutdown_event.set()


def run_authorization_flow(
    client: "GabAPIClient",
    open_browser: bool = True,
    timeout: int = 300,
    **server_kwargs,
) -> AuthorizationResult:
    """
    Run the complete authorization flow for one user.

    The client's redirect URI is pointed at the local callback server, the
    authorization URL is printed (and optionally opened), and the function
    blocks until the redirect arrives or the timeout expires.

    Args:
        client: Client with scopes configured
        open_browser: Whether to open the authorization URL in a browser
        timeout: Seconds to wait for the callback
        **server_kwargs: host, port, path or ssl_context for the callback server

    Returns:
        AuthorizationResult with tokens or error
    """
    server = OAuthCallbackServer(client, **server_kwargs)
    client.set_redirect_uri(server.callback_url)

    try:
        server.start()
        auth_url = client.authorization_url

        # Banner goes to stderr; stdout is left to the caller
        out = sys.stderr
        print("\n" + "=" * 70, file=out)
        print("GAB OAUTH AUTHORIZATION", file=out)
        print("=" * 70, file=out)
        print("\nPlease authorize the application by visiting:", file=out)
        print(f"\n  {auth_url}\n", file=out)

        if open_browser:
            try:
                webbrowser.open(auth_url)
            except webbrowser.Error as e:
                logger.warning(f"Could not open browser automatically: {e}")
                print("Please copy the URL above and paste it in your browser.", file=out)

        print("Waiting for authorization...", file=out)
        print("=" * 70 + "\n", file=out)

        result = server.wait_for_callback(timeout)

        if result.success:
            logger.info("Authorization flow completed successfully")
        else:
            logger.error(
                f"Authorization flow failed: {result.error} - {result.error_description}"
            )
        return result

    finally:
        server.stop()
