"""User Management API: users and code-based authentication."""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, Optional

from ..core.errors import UserNotFoundError
from ..core.types import compact
from ..endpoints import endpoint_path

if TYPE_CHECKING:
    from ..client import WorkOs


@dataclass
class User:
    id: str
    email: str
    first_name: Optional[str]
    last_name: Optional[str]
    email_verified: bool
    created_at: str
    updated_at: str
    profile_picture_url: Optional[str] = None

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "User":
        return cls(
            id=payload["id"],
            email=payload["email"],
            first_name=payload.get("first_name"),
            last_name=payload.get("last_name"),
            email_verified=bool(payload.get("email_verified", False)),
            created_at=payload["created_at"],
            updated_at=payload["updated_at"],
            profile_picture_url=payload.get("profile_picture_url"),
        )


@dataclass
class AuthenticateWithCodeResponse:
    user: User
    organization_id: Optional[str] = None

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "AuthenticateWithCodeResponse":
        return cls(user=User.from_dict(payload["user"]), organization_id=payload.get("organization_id"))


class UserManagement:
    def __init__(self, workos: "WorkOs"):
        self.workos = workos

    async def get_user(self, user_id: str) -> User:
        response = await self.workos.request("GET", endpoint_path("user_management", "user", id=user_id))
        if response.status == 404:
            raise UserNotFoundError(response.text)
        response.raise_for_unauthorized_or_status()
        return response.parse(User.from_dict)

    async def authenticate_with_code(
        self,
        client_id: str,
        code: str,
        client_secret: Optional[str] = None,
        ip_address: Optional[str] = None,
        user_agent: Optional[str] = None,
    ) -> AuthenticateWithCodeResponse:
        form = compact(
            {
                "client_id": client_id,
                "client_secret": client_secret or self.workos.api_key,
                "grant_type": "authorization_code",
                "code": code,
                "ip_address": ip_address,
                "user_agent": user_agent,
            }
        )
        response = await self.workos.request(
            "POST", endpoint_path("user_management", "authenticate"), data=form, authenticated=False
        )
        response.raise_for_oauth_error()
        return response.parse(AuthenticateWithCodeResponse.from_dict)
