"""
Core building blocks shared by every WorkOS feature module.
"""

from .errors import (
    AuthenticationError,
    InvalidPhoneNumberError,
    OperationError,
    RequestError,
    UnauthorizedError,
    UserNotFoundError,
    WorkOsError,
)
from .pagination import fetch_all, iterate_all
from .response import ApiResponse
from .types import (
    ListMetadata,
    PaginatedList,
    PaginationOrder,
    PaginationParams,
    RawAttributes,
    Timestamps,
    known_or_unknown,
    parse_timestamp,
)

__all__ = [
    "ApiResponse",
    "AuthenticationError",
    "InvalidPhoneNumberError",
    "ListMetadata",
    "OperationError",
    "PaginatedList",
    "PaginationOrder",
    "PaginationParams",
    "RawAttributes",
    "RequestError",
    "Timestamps",
    "UnauthorizedError",
    "UserNotFoundError",
    "WorkOsError",
    "fetch_all",
    "iterate_all",
    "known_or_unknown",
    "parse_timestamp",
]
