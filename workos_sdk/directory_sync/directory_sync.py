"""Directory Sync API: directories and their users and groups."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Optional, Union

from ..core.types import PaginatedList, PaginationParams, wire_value
from ..endpoints import endpoint_path
from .types import Directory, DirectoryGroup, DirectoryType, DirectoryUser

if TYPE_CHECKING:
    from ..client import WorkOs


def _single_filter(**filters: Optional[str]) -> Dict[str, str]:
    selected = {key: value for key, value in filters.items() if value}
    if len(selected) != 1:
        names = " or ".join(filters)
        raise ValueError(f"Exactly one of {names} must be given")
    return selected


class DirectorySync:
    def __init__(self, workos: "WorkOs"):
        self.workos = workos

    async def list_directories(
        self,
        domain: Optional[str] = None,
        search: Optional[str] = None,
        organization_id: Optional[str] = None,
        directory_type: Optional[Union[DirectoryType, str]] = None,
        pagination: Optional[PaginationParams] = None,
    ) -> PaginatedList[Directory]:
        params: Dict[str, Any] = (pagination or PaginationParams()).to_query()
        if domain:
            params["domain"] = domain
        if search:
            params["search"] = search
        if organization_id:
            params["organization_id"] = organization_id
        if directory_type:
            params["directory_type"] = wire_value(directory_type)

        response = await self.workos.request("GET", endpoint_path("directories", "list"), params=params)
        response.raise_for_unauthorized_or_status()
        return response.parse(PaginatedList.from_dict, Directory.from_dict)

    async def get_directory(self, directory_id: str) -> Directory:
        response = await self.workos.request("GET", endpoint_path("directories", "detail", id=directory_id))
        response.raise_for_unauthorized_or_status()
        return response.parse(Directory.from_dict)

    async def delete_directory(self, directory_id: str) -> None:
        response = await self.workos.request("DELETE", endpoint_path("directories", "detail", id=directory_id))
        response.raise_for_unauthorized_or_status()

    async def list_directory_users(
        self,
        directory: Optional[str] = None,
        group: Optional[str] = None,
        pagination: Optional[PaginationParams] = None,
    ) -> PaginatedList[DirectoryUser]:
        params: Dict[str, Any] = (pagination or PaginationParams()).to_query()
        params.update(_single_filter(directory=directory, group=group))

        response = await self.workos.request("GET", endpoint_path("directory_users", "list"), params=params)
        response.raise_for_unauthorized_or_status()
        return response.parse(PaginatedList.from_dict, DirectoryUser.from_dict)

    async def get_directory_user(self, directory_user_id: str) -> DirectoryUser:
        response = await self.workos.request(
            "GET", endpoint_path("directory_users", "detail", id=directory_user_id)
        )
        response.raise_for_unauthorized_or_status()
        return response.parse(DirectoryUser.from_dict)

    async def list_directory_groups(
        self,
        directory: Optional[str] = None,
        user: Optional[str] = None,
        pagination: Optional[PaginationParams] = None,
    ) -> PaginatedList[DirectoryGroup]:
        params: Dict[str, Any] = (pagination or PaginationParams()).to_query()
        params.update(_single_filter(directory=directory, user=user))

        response = await self.workos.request("GET", endpoint_path("directory_groups", "list"), params=params)
        response.raise_for_unauthorized_or_status()
        return response.parse(PaginatedList.from_dict, DirectoryGroup.from_dict)

    async def get_directory_group(self, directory_group_id: str) -> DirectoryGroup:
        response = await self.workos.request(
            "GET", endpoint_path("directory_groups", "detail", id=directory_group_id)
        )
        response.raise_for_unauthorized_or_status()
        return response.parse(DirectoryGroup.from_dict)
