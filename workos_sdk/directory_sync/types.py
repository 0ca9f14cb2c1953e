"""Directory Sync resources mirrored from the connected identity provider."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from ..core.types import RawAttributes, Timestamps, known_or_unknown


class DirectoryType(str, Enum):
    AZURE_SCIM_V2_0 = "azure scim v2.0"
    BAMBOO_HR = "bamboohr"
    BREATHE_HR = "breathe hr"
    CYBER_ARK_SCIM_V2_0 = "cyberark scim v2.0"
    GENERIC_SCIM_V1_1 = "generic scim v1.1"
    GENERIC_SCIM_V2_0 = "generic scim v2.0"
    GOOGLE_WORKSPACE = "gsuite directory"
    HIBOB = "hibob"
    JUMP_CLOUD_SCIM_V2_0 = "jump cloud scim v2.0"
    OKTA_SCIM_V1_1 = "okta scim v1.1"
    OKTA_SCIM_V2_0 = "okta scim v2.0"
    ONE_LOGIN_SCIM_V2_0 = "onelogin scim v2.0"
    PEOPLE_HR = "people hr"
    PING_FEDERATE_SCIM_V2_0 = "pingfederate scim v2.0"
    RIPPLING = "rippling"
    WORKDAY = "workday"


class DirectoryState(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    DELETING = "deleting"


class DirectoryUserState(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    SUSPENDED = "suspended"


@dataclass
class Directory:
    id: str
    name: str
    type: Union[DirectoryType, str]
    state: Union[DirectoryState, str]
    timestamps: Timestamps
    organization_id: Optional[str] = None
    domain: Optional[str] = None

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "Directory":
        return cls(
            id=payload["id"],
            name=payload["name"],
            type=known_or_unknown(DirectoryType, payload["type"]),
            state=known_or_unknown(DirectoryState, payload["state"]),
            timestamps=Timestamps.from_dict(payload),
            organization_id=payload.get("organization_id"),
            domain=payload.get("domain"),
        )


@dataclass
class DirectoryGroup:
    id: str
    idp_id: str
    directory_id: str
    name: str
    timestamps: Timestamps
    organization_id: Optional[str] = None
    raw_attributes: RawAttributes = field(default_factory=dict)

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "DirectoryGroup":
        return cls(
            id=payload["id"],
            # group summaries embedded in users may omit idp_id
            idp_id=payload.get("idp_id", ""),
            directory_id=payload["directory_id"],
            name=payload["name"],
            timestamps=Timestamps.from_dict(payload),
            organization_id=payload.get("organization_id"),
            raw_attributes=payload.get("raw_attributes") or {},
        )


@dataclass
class DirectoryUserEmail:
    primary: Optional[bool] = None
    type: Optional[str] = None
    value: Optional[str] = None

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "DirectoryUserEmail":
        return cls(primary=payload.get("primary"), type=payload.get("type"), value=payload.get("value"))


@dataclass
class DirectoryUser:
    id: str
    idp_id: str
    directory_id: str
    state: Union[DirectoryUserState, str]
    timestamps: Timestamps
    organization_id: Optional[str] = None
    username: Optional[str] = None
    emails: List[DirectoryUserEmail] = field(default_factory=list)
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    custom_attributes: Dict[str, Any] = field(default_factory=dict)
    raw_attributes: RawAttributes = field(default_factory=dict)
    groups: List[DirectoryGroup] = field(default_factory=list)

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "DirectoryUser":
        return cls(
            id=payload["id"],
            idp_id=payload["idp_id"],
            directory_id=payload["directory_id"],
            state=known_or_unknown(DirectoryUserState, payload["state"]),
            timestamps=Timestamps.from_dict(payload),
            organization_id=payload.get("organization_id"),
            username=payload.get("username"),
            emails=[DirectoryUserEmail.from_dict(e) for e in payload.get("emails", [])],
            first_name=payload.get("first_name"),
            last_name=payload.get("last_name"),
            custom_attributes=payload.get("custom_attributes") or {},
            raw_attributes=payload.get("raw_attributes") or {},
            groups=[DirectoryGroup.from_dict(g) for g in payload.get("groups", [])],
        )

    def primary_email(self) -> Optional[DirectoryUserEmail]:
        return next((email for email in self.emails if email.primary is True), None)
