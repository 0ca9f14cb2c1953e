"""
Authentication for WorkOS API requests.
"""

from .authentication import DEFAULT_USER_AGENT, WorkOsAuthenticator

__all__ = ["DEFAULT_USER_AGENT", "WorkOsAuthenticator"]
