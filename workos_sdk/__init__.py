"""
WorkOS Async SDK
Typed asyncio client for the WorkOS API built on aiohttp.
"""
__version__ = "0.2.0"
__author__ = "WorkOS Async SDK"
from .client import WorkOs
from .config import ClientSettings, ConfigLoader, load_client_settings
from .core import (
    AuthenticationError,
    InvalidPhoneNumberError,
    OperationError,
    PaginatedList,
    PaginationOrder,
    PaginationParams,
    RequestError,
    UnauthorizedError,
    UserNotFoundError,
    WorkOsError,
    fetch_all,
    iterate_all,
)
from .entrypoints import run_sync

__all__ = [
    "AuthenticationError",
    "ClientSettings",
    "ConfigLoader",
    "InvalidPhoneNumberError",
    "OperationError",
    "PaginatedList",
    "PaginationOrder",
    "PaginationParams",
    "RequestError",
    "UnauthorizedError",
    "UserNotFoundError",
    "WorkOs",
    "WorkOsError",
    "fetch_all",
    "iterate_all",
    "load_client_settings",
    "run_sync",
]
