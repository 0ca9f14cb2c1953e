"""Single Sign-On API: authorization URLs, token exchange, profiles and connections."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Optional, Tuple, Union
from urllib.parse import urlencode

from ..core.types import PaginatedList, PaginationParams, wire_value
from ..endpoints import endpoint_path
from .types import Connection, ConnectionType, Profile, ProfileAndToken, Provider

if TYPE_CHECKING:
    from ..client import WorkOs


class Sso:
    def __init__(self, workos: "WorkOs"):
        self.workos = workos

    def get_authorization_url(
        self,
        client_id: str,
        redirect_uri: str,
        connection: Optional[str] = None,
        organization: Optional[str] = None,
        provider: Optional[Union[Provider, str]] = None,
        state: Optional[str] = None,
    ) -> str:
        """
        Build the URL that starts an SSO login. No request is made.

        Exactly one of connection, organization or provider selects the identity provider.
        """
        selectors = [
            (name, value)
            for name, value in (("connection", connection), ("organization", organization), ("provider", provider))
            if value
        ]
        if len(selectors) != 1:
            raise ValueError("Exactly one of connection, organization or provider must be given")
        selector_name, selector_value = selectors[0]

        query: List[Tuple[str, str]] = [
            ("response_type", "code"),
            ("client_id", client_id),
            ("redirect_uri", redirect_uri),
            (selector_name, wire_value(selector_value)),
        ]
        if state:
            query.append(("state", state))

        return f"{self.workos.url_for(endpoint_path('sso', 'authorize'))}?{urlencode(query)}"

    async def get_profile_and_token(self, client_id: str, code: str) -> ProfileAndToken:
        form = {
            "client_id": client_id,
            "client_secret": self.workos.api_key,
            "grant_type": "authorization_code",
            "code": code,
        }
        response = await self.workos.request(
            "POST", endpoint_path("sso", "token"), data=form, authenticated=False
        )
        response.raise_for_oauth_error()
        return response.parse(ProfileAndToken.from_dict)

    async def get_profile(self, access_token: str) -> Profile:
        response = await self.workos.request(
            "GET", endpoint_path("sso", "profile"), access_token=access_token
        )
        response.raise_for_unauthorized_or_status()
        return response.parse(Profile.from_dict)

    async def get_connection(self, connection_id: str) -> Connection:
        response = await self.workos.request("GET", endpoint_path("connections", "detail", id=connection_id))
        response.raise_for_unauthorized_or_status()
        return response.parse(Connection.from_dict)

    async def list_connections(
        self,
        organization_id: Optional[str] = None,
        connection_type: Optional[Union[ConnectionType, str]] = None,
        pagination: Optional[PaginationParams] = None,
    ) -> PaginatedList[Connection]:
        params: Dict[str, Any] = (pagination or PaginationParams()).to_query()
        if organization_id:
            params["organization_id"] = organization_id
        if connection_type:
            params["connection_type"] = wire_value(connection_type)

        response = await self.workos.request("GET", endpoint_path("connections", "list"), params=params)
        response.raise_for_unauthorized_or_status()
        return response.parse(PaginatedList.from_dict, Connection.from_dict)

    async def delete_connection(self, connection_id: str) -> None:
        response = await self.workos.request("DELETE", endpoint_path("connections", "detail", id=connection_id))
        response.raise_for_unauthorized_or_status()
