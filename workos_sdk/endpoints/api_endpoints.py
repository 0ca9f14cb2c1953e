"""
Endpoint definitions for the WorkOS API.
Paths are relative to the client's base URL; identifiers are filled in by endpoint_path().
"""

from typing import Any, Dict
from urllib.parse import quote


def get_api_endpoints() -> Dict[str, Dict[str, Any]]:
    """Get endpoint paths grouped by feature."""
    return {
        # 1. Organizations
        "organizations": {
            "list": "/organizations",
            "detail": "/organizations/{id}",
        },

        # 2. Directory Sync
        "directories": {
            "list": "/directories",
            "detail": "/directories/{id}",
        },
        "directory_users": {
            "list": "/directory_users",
            "detail": "/directory_users/{id}",
        },
        "directory_groups": {
            "list": "/directory_groups",
            "detail": "/directory_groups/{id}",
        },

        # 3. SSO
        "sso": {
            "authorize": "/sso/authorize",
            "token": "/sso/token",
            "profile": "/sso/profile",
        },
        "connections": {
            "list": "/connections",
            "detail": "/connections/{id}",
        },

        # 4. MFA
        "auth_factors": {
            "enroll": "/auth/factors/enroll",
            "challenge": "/auth/factors/{id}/challenge",
            "verify": "/auth/factors/verify",
        },

        # 5. Passwordless
        "passwordless_sessions": {
            "create": "/passwordless/sessions",
            "send": "/passwordless/sessions/{id}/send",
        },

        # 6. Admin Portal
        "portal": {
            "generate_link": "/portal/generate_link",
        },

        # 7. User Management
        "user_management": {
            "authenticate": "/user_management/authenticate",
            "user": "/user_management/users/{id}",
        },
    }


_ENDPOINTS = get_api_endpoints()


def endpoint_path(feature: str, name: str, **ids: Any) -> str:
    """Format an endpoint path, URL-quoting each identifier."""
    template = _ENDPOINTS[feature][name]
    return template.format(**{key: quote(str(value), safe="") for key, value in ids.items()})
