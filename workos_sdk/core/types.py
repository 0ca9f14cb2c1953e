"""Shared request/response types: pagination, timestamps and enum helpers."""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Callable, Dict, Generic, Iterable, List, Optional, Type, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E", bound=Enum)

RawAttributes = Dict[str, Any]

_FRACTION = re.compile(r"\.(\d+)(?=[+-]\d{2}:\d{2}$)")


class PaginationOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


DEFAULT_ORDER = PaginationOrder.DESC


@dataclass
class PaginationParams:
    order: PaginationOrder = DEFAULT_ORDER
    before: Optional[str] = None
    after: Optional[str] = None
    limit: Optional[int] = None

    def to_query(self) -> Dict[str, Any]:
        query: Dict[str, Any] = {"order": PaginationOrder(self.order).value}
        if self.before:
            query["before"] = self.before
        if self.after:
            query["after"] = self.after
        if self.limit is not None:
            query["limit"] = self.limit
        return query


@dataclass
class ListMetadata:
    before: Optional[str] = None
    after: Optional[str] = None


@dataclass
class PaginatedList(Generic[T]):
    data: List[T]
    metadata: ListMetadata = field(default_factory=ListMetadata)

    @classmethod
    def from_dict(cls, payload: Dict[str, Any], item_parser: Callable[[Dict[str, Any]], T]) -> "PaginatedList[T]":
        metadata = payload.get("list_metadata") or {}
        return cls(
            data=[item_parser(item) for item in payload.get("data", [])],
            metadata=ListMetadata(before=metadata.get("before"), after=metadata.get("after")),
        )

    def __iter__(self):
        return iter(self.data)

    def __len__(self) -> int:
        return len(self.data)


def parse_timestamp(value: str) -> datetime:
    """Parse an RFC 3339 timestamp as sent by the API (``2021-06-25T19:07:33.155Z``)."""
    if not isinstance(value, str):
        raise ValueError(f"Timestamp must be a string, got {type(value).__name__}")
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    # fromisoformat before 3.11 only takes 3 or 6 fractional digits
    text = _FRACTION.sub(lambda m: "." + m.group(1)[:6].ljust(6, "0"), text)
    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        raise ValueError(f"Timestamp without offset: {value}")
    return parsed


def parse_optional_timestamp(value: Optional[str]) -> Optional[datetime]:
    if value is None:
        return None
    return parse_timestamp(value)


@dataclass
class Timestamps:
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "Timestamps":
        return cls(
            created_at=parse_timestamp(payload["created_at"]),
            updated_at=parse_timestamp(payload["updated_at"]),
        )


def known_or_unknown(enum_cls: Type[E], value: Any) -> Union[E, Any]:
    """Map a wire value to ``enum_cls`` when known, keeping the raw value otherwise."""
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        return value


def wire_value(value: Union[Enum, str]) -> str:
    return value.value if isinstance(value, Enum) else str(value)


def encode_list(values: Iterable[Any]) -> str:
    return ",".join(str(value) for value in values)


def compact(mapping: Dict[str, Any]) -> Dict[str, Any]:
    """Drop keys whose value is None."""
    return {key: value for key, value in mapping.items() if value is not None}
