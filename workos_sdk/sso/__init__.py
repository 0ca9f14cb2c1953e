"""
Single Sign-On API.
"""

from .sso import Sso
from .types import (
    Connection,
    ConnectionDomain,
    ConnectionState,
    ConnectionType,
    Profile,
    ProfileAndToken,
    Provider,
)

__all__ = [
    "Connection",
    "ConnectionDomain",
    "ConnectionState",
    "ConnectionType",
    "Profile",
    "ProfileAndToken",
    "Provider",
    "Sso",
]
