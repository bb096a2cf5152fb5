#!/usr/bin/env python3
"""
Gab OAuth Authorization Script

This script runs the OAuth authorization flow against Gab.com and prints
the resulting tokens as JSON. It starts a local callback server, prints
(and optionally opens) the authorization URL and waits for the redirect.

The library does not store tokens: redirect the output to a file or paste
the tokens into your own storage.

Usage:
    # Authorize with read and write-post scopes
    python scripts/authorize_gab.py --scopes read write-post > tokens.json

    # Refresh an access token
    python scripts/authorize_gab.py --refresh <refresh_token>

Prerequisites:
    - Environment variables must be set:
        export GAB_CLIENT_ID="your_client_id"
        export GAB_CLIENT_SECRET="your_client_secret"
    - The callback URL (default http://localhost:8080/oauth/callback) must be
      registered as a redirect URI of the Gab application
"""

import argparse
import json
import logging
import sys
from typing import Sequence

from gabapi import GabAPIClient, GabClientConfig
from gabapi.exceptions import ConfigurationError, GabAPIError
from gabapi.oauth import run_authorization_flow

# Setup logging (stderr, so stdout carries only the token JSON)
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s",
    stream=sys.stderr,
)
logger = logging.getLogger(__name__)


def build_client(scopes: Sequence[str]) -> GabAPIClient:
    config = GabClientConfig.from_env()
    if scopes:
        config = config.with_changes(scopes=tuple(scopes))
    return GabAPIClient.from_config(config)


def authorize(scopes: Sequence[str], port: int, open_browser: bool = True) -> int:
    """
    Run the authorization flow.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    try:
        with build_client(scopes) as client:
            if not client.scopes:
                logger.error("No scopes requested. Pass --scopes or set GAB_SCOPES")
                return 1

            result = run_authorization_flow(client, open_browser=open_browser, port=port)

        if not result.success:
            logger.error(f"Authorization failed: {result.error} - {result.error_description}")
            return 1

        print(json.dumps(result.token.to_dict(), indent=2))
        logger.info("Authorization successful")
        return 0

    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        return 1
    except GabAPIError as e:
        logger.error(f"Authorization error: {e}")
        return 1


def refresh(refresh_token: str, scopes: Sequence[str]) -> int:
    """
    Refresh an access token.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    try:
        with build_client(scopes) as client:
            token = client.refresh_access_token(refresh_token)
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        return 1
    except GabAPIError as e:
        logger.error(f"Token refresh failed: {e}")
        return 1

    print(json.dumps(token.to_dict(), indent=2))
    return 0


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Gab OAuth Authorization",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Prerequisites:
  Set environment variables:
       export GAB_CLIENT_ID='your_client_id'
       export GAB_CLIENT_SECRET='your_client_secret'

Examples:
  # Run authorization flow
  python scripts/authorize_gab.py --scopes read notifications

  # Refresh an access token
  python scripts/authorize_gab.py --refresh <refresh_token> --scopes read
        """,
    )
    parser.add_argument(
        "--scopes",
        nargs="+",
        default=[],
        help="Scopes to request (read, engage-user, engage-post, write-post, notifications)",
    )
    parser.add_argument(
        "--refresh",
        metavar="REFRESH_TOKEN",
        help="Refresh an access token instead of running the authorization flow",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8080,
        help="Port for the local callback server (default: 8080)",
    )
    parser.add_argument(
        "--no-browser",
        action="store_true",
        help="Don't automatically open browser (display URL only)",
    )

    args = parser.parse_args()

    if args.refresh:
        sys.exit(refresh(args.refresh, args.scopes))

    sys.exit(authorize(args.scopes, args.port, open_browser=not args.no_browser))


if __name__ == "__main__":
    main()
