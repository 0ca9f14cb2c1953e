"""
Authentication handling for the WorkOS API.
Requests carry the secret API key as a bearer token; SSO profile lookups
carry the user's access token instead.
"""

import logging
from typing import Dict, Optional

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "workos-async-sdk"


class WorkOsAuthenticator:
    """Builds authorization headers for WorkOS API requests."""

    def __init__(self, user_agent: Optional[str] = None):
        self.user_agent = user_agent or DEFAULT_USER_AGENT

        # Credentials
        self.api_key: Optional[str] = None

        # Headers will be set after authentication setup
        self.headers: Optional[Dict[str, str]] = None

    def set_api_key(self, api_key: str):
        """Set the secret API key (``sk_...``)."""
        self.api_key = api_key

    def setup_authentication(self) -> Dict[str, str]:
        """Setup default headers from the configured API key."""
        if not self.api_key:
            raise RuntimeError("No authentication credentials available (WorkOS API key is not set)")

        self.headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Accept": "application/json",
            "User-Agent": self.user_agent,
        }
        logger.debug("Using bearer API key authentication")
        return self.headers

    def get_headers(self, access_token: Optional[str] = None, authenticated: bool = True) -> Dict[str, str]:
        """
        Get headers for one request.

        Args:
            access_token: Bearer token to send instead of the API key
            authenticated: False for endpoints that take credentials in the body
        """
        if self.headers is None:
            self.setup_authentication()

        headers = dict(self.headers)
        if access_token:
            headers["Authorization"] = f"Bearer {access_token}"
        elif not authenticated:
            headers.pop("Authorization", None)
        return headers
