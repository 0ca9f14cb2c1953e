"""Organization resources."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..core.types import Timestamps


@dataclass
class OrganizationDomain:
    id: str
    domain: str

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "OrganizationDomain":
        return cls(id=payload["id"], domain=payload["domain"])


@dataclass
class Organization:
    id: str
    name: str
    timestamps: Timestamps
    allow_profiles_outside_organization: bool = False
    domains: List[OrganizationDomain] = field(default_factory=list)

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "Organization":
        return cls(
            id=payload["id"],
            name=payload["name"],
            timestamps=Timestamps.from_dict(payload),
            allow_profiles_outside_organization=bool(payload.get("allow_profiles_outside_organization", False)),
            domains=[OrganizationDomain.from_dict(d) for d in payload.get("domains", [])],
        )

    def domain_names(self) -> List[str]:
        return [d.domain for d in self.domains]


def domain_list(domains: Optional[Any]) -> Optional[List[str]]:
    """Deduplicate domains, keeping first-seen order."""
    if domains is None:
        return None
    return list(dict.fromkeys(domains))
