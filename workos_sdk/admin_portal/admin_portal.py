"""Admin Portal links for customer IT admins."""
from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Optional, Union

from ..core.errors import RequestError
from ..core.types import compact, wire_value
from ..endpoints import endpoint_path

if TYPE_CHECKING:
    from ..client import WorkOs


class AdminPortalIntent(str, Enum):
    SSO = "sso"
    DIRECTORY_SYNC = "dsync"


class AdminPortal:
    def __init__(self, workos: "WorkOs"):
        self.workos = workos

    async def generate_portal_link(
        self,
        organization: str,
        intent: Union[AdminPortalIntent, str],
        return_url: Optional[str] = None,
    ) -> str:
        body = compact({"organization": organization, "intent": wire_value(intent), "return_url": return_url})
        response = await self.workos.request("POST", endpoint_path("portal", "generate_link"), json=body)
        response.raise_for_unauthorized_or_status()
        link = response.json_object().get("link")
        if not link:
            raise RequestError("Portal link missing from response", response.status, response.text)
        return link
