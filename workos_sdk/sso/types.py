"""SSO connections and user profiles."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from ..core.types import RawAttributes, Timestamps, known_or_unknown


class ConnectionType(str, Enum):
    ADFS_SAML = "ADFSSAML"
    ADP_OIDC = "ADPOIDC"
    AUTH0_SAML = "Auth0SAML"
    AZURE_SAML = "AzureSAML"
    CAS_SAML = "CASSAML"
    CLASS_LINK_SAML = "ClassLinkSAML"
    CLOUDFLARE_SAML = "CloudflareSAML"
    CYBER_ARK_SAML = "CyberArkSAML"
    DUO_SAML = "DuoSAML"
    GENERIC_OIDC = "GenericOIDC"
    GENERIC_SAML = "GenericSAML"
    GOOGLE_OAUTH = "GoogleOAuth"
    GOOGLE_SAML = "GoogleSAML"
    JUMP_CLOUD_SAML = "JumpCloudSAML"
    KEYCLOAK_SAML = "KeycloakSAML"
    MICROSOFT_OAUTH = "MicrosoftOAuth"
    MINI_ORANGE_SAML = "MiniOrangeSAML"
    NET_IQ_SAML = "NetIqSAML"
    OKTA_SAML = "OktaSAML"
    ONE_LOGIN_SAML = "OneLoginSAML"
    ORACLE_SAML = "OracleSAML"
    PING_FEDERATE_SAML = "PingFederateSAML"
    PING_ONE_SAML = "PingOneSAML"
    SALESFORCE_SAML = "SalesforceSAML"
    SHIBBOLETH_SAML = "ShibbolethSAML"
    SIMPLE_SAML_PHP_SAML = "SimpleSamlPhpSAML"
    VMWARE_SAML = "VMwareSAML"


class ConnectionState(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"


class Provider(str, Enum):
    """OAuth providers usable as an authorization URL selector."""

    GOOGLE_OAUTH = "GoogleOAuth"
    MICROSOFT_OAUTH = "MicrosoftOAuth"


@dataclass
class ConnectionDomain:
    id: str
    domain: str


@dataclass
class Connection:
    id: str
    name: str
    connection_type: Union[ConnectionType, str]
    state: Union[ConnectionState, str]
    organization_id: Optional[str] = None
    domains: List[ConnectionDomain] = field(default_factory=list)
    timestamps: Optional[Timestamps] = None

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "Connection":
        has_timestamps = "created_at" in payload and "updated_at" in payload
        return cls(
            id=payload["id"],
            name=payload["name"],
            connection_type=known_or_unknown(ConnectionType, payload["connection_type"]),
            state=known_or_unknown(ConnectionState, payload["state"]),
            organization_id=payload.get("organization_id"),
            domains=[ConnectionDomain(id=d["id"], domain=d["domain"]) for d in payload.get("domains", [])],
            timestamps=Timestamps.from_dict(payload) if has_timestamps else None,
        )


@dataclass
class Profile:
    id: str
    connection_id: str
    connection_type: Union[ConnectionType, str]
    idp_id: str
    email: str
    organization_id: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    raw_attributes: RawAttributes = field(default_factory=dict)

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "Profile":
        return cls(
            id=payload["id"],
            connection_id=payload["connection_id"],
            connection_type=known_or_unknown(ConnectionType, payload["connection_type"]),
            idp_id=payload["idp_id"],
            email=payload["email"],
            organization_id=payload.get("organization_id"),
            first_name=payload.get("first_name"),
            last_name=payload.get("last_name"),
            raw_attributes=payload.get("raw_attributes") or {},
        )


@dataclass
class ProfileAndToken:
    access_token: str
    profile: Profile

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "ProfileAndToken":
        return cls(access_token=payload["access_token"], profile=Profile.from_dict(payload["profile"]))
