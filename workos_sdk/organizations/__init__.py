"""
Organizations API.
"""

from .organizations import Organizations
from .types import Organization, OrganizationDomain

__all__ = ["Organization", "OrganizationDomain", "Organizations"]
