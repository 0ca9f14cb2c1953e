"""Organizations API: create, read, list, update and delete."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Iterable, Optional

from ..core.types import PaginatedList, PaginationParams, compact, encode_list
from ..endpoints import endpoint_path
from .types import Organization, domain_list

if TYPE_CHECKING:
    from ..client import WorkOs


class Organizations:
    def __init__(self, workos: "WorkOs"):
        self.workos = workos

    async def create_organization(
        self,
        name: str,
        domains: Iterable[str] = (),
        allow_profiles_outside_organization: Optional[bool] = None,
    ) -> Organization:
        body = compact(
            {
                "name": name,
                "allow_profiles_outside_organization": allow_profiles_outside_organization,
                "domains": domain_list(domains),
            }
        )
        response = await self.workos.request(
            "POST", endpoint_path("organizations", "list"), json=body
        )
        response.raise_for_unauthorized_or_status()
        return response.parse(Organization.from_dict)

    async def get_organization(self, organization_id: str) -> Organization:
        response = await self.workos.request(
            "GET", endpoint_path("organizations", "detail", id=organization_id)
        )
        response.raise_for_unauthorized_or_status()
        return response.parse(Organization.from_dict)

    async def list_organizations(
        self,
        domains: Optional[Iterable[str]] = None,
        pagination: Optional[PaginationParams] = None,
    ) -> PaginatedList[Organization]:
        params: Dict[str, Any] = (pagination or PaginationParams()).to_query()
        if domains:
            params["domains[]"] = encode_list(domains)
        response = await self.workos.request(
            "GET", endpoint_path("organizations", "list"), params=params
        )
        response.raise_for_unauthorized_or_status()
        return response.parse(PaginatedList.from_dict, Organization.from_dict)

    async def update_organization(
        self,
        organization_id: str,
        name: Optional[str] = None,
        allow_profiles_outside_organization: Optional[bool] = None,
        domains: Optional[Iterable[str]] = None,
    ) -> Organization:
        body = compact(
            {
                "name": name,
                "allow_profiles_outside_organization": allow_profiles_outside_organization,
                "domains": domain_list(domains),
            }
        )
        response = await self.workos.request(
            "PUT", endpoint_path("organizations", "detail", id=organization_id), json=body
        )
        response.raise_for_unauthorized_or_status()
        return response.parse(Organization.from_dict)

    async def delete_organization(self, organization_id: str) -> None:
        response = await self.workos.request(
            "DELETE", endpoint_path("organizations", "detail", id=organization_id)
        )
        response.raise_for_unauthorized_or_status()
