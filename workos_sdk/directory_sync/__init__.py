"""
Directory Sync API.
"""

from .directory_sync import DirectorySync
from .types import (
    Directory,
    DirectoryGroup,
    DirectoryState,
    DirectoryType,
    DirectoryUser,
    DirectoryUserEmail,
    DirectoryUserState,
)

__all__ = [
    "Directory",
    "DirectoryGroup",
    "DirectoryState",
    "DirectorySync",
    "DirectoryType",
    "DirectoryUser",
    "DirectoryUserEmail",
    "DirectoryUserState",
]
