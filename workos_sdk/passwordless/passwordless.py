"""Passwordless (Magic Link) sessions."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING, Any, Dict, Optional

from ..core.types import compact, parse_timestamp
from ..endpoints import endpoint_path

if TYPE_CHECKING:
    from ..client import WorkOs

MAGIC_LINK = "MagicLink"


@dataclass
class PasswordlessSession:
    id: str
    email: str
    link: str
    expires_at: datetime

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "PasswordlessSession":
        return cls(
            id=payload["id"],
            email=payload["email"],
            link=payload["link"],
            expires_at=parse_timestamp(payload["expires_at"]),
        )


class Passwordless:
    def __init__(self, workos: "WorkOs"):
        self.workos = workos

    async def create_session(
        self,
        email: str,
        redirect_uri: Optional[str] = None,
        state: Optional[str] = None,
    ) -> PasswordlessSession:
        body = compact({"type": MAGIC_LINK, "email": email, "redirect_uri": redirect_uri, "state": state})
        response = await self.workos.request(
            "POST", endpoint_path("passwordless_sessions", "create"), json=body
        )
        response.raise_for_unauthorized_or_status()
        return response.parse(PasswordlessSession.from_dict)

    async def send_session(self, session_id: str) -> None:
        """Email the Magic Link for a session created earlier."""
        response = await self.workos.request(
            "POST", endpoint_path("passwordless_sessions", "send", id=session_id), json={"id": session_id}
        )
        response.raise_for_unauthorized_or_status()
