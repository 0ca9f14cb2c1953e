"""Fully-read HTTP reply plus the status classification shared by all operations."""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Mapping, TypeVar

from .errors import AuthenticationError, RequestError, UnauthorizedError

T = TypeVar("T")

UNAUTHORIZED_OAUTH_ERRORS = ("invalid_client", "unauthorized_client")


@dataclass
class ApiResponse:
    status: int
    text: str = ""
    headers: Mapping[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    def json(self) -> Any:
        try:
            return json.loads(self.text) if self.text else None
        except json.JSONDecodeError as exc:
            raise RequestError(f"Invalid JSON in response: {exc}", self.status, self.text) from exc

    def json_object(self) -> Dict[str, Any]:
        payload = self.json()
        if not isinstance(payload, dict):
            raise RequestError("Expected a JSON object in response", self.status, self.text)
        return payload

    def parse(self, parser: Callable[..., T], *args: Any) -> T:
        """Run ``parser(json_object, *args)``; a payload that doesn't fit the model is a RequestError."""
        payload = self.json_object()
        try:
            return parser(payload, *args)
        except (KeyError, TypeError, ValueError, AttributeError) as exc:
            raise RequestError(f"Unexpected response payload: {exc!r}", self.status, self.text) from exc

    def error_message(self) -> str:
        """Best-effort message from an error body ({"message": ...} or OAuth style)."""
        try:
            payload = json.loads(self.text) if self.text else None
        except json.JSONDecodeError:
            payload = None
        if isinstance(payload, dict):
            for key in ("message", "error_description", "error"):
                if payload.get(key):
                    return str(payload[key])
        return self.text or f"HTTP {self.status}"

    def raise_for_unauthorized(self) -> "ApiResponse":
        if self.status == 401:
            raise UnauthorizedError(self.error_message())
        return self

    def raise_for_status(self) -> "ApiResponse":
        if not self.ok:
            raise RequestError(self.error_message(), self.status, self.text)
        return self

    def raise_for_unauthorized_or_status(self) -> "ApiResponse":
        return self.raise_for_unauthorized().raise_for_status()

    def raise_for_oauth_error(self) -> "ApiResponse":
        """Classify token-exchange failures reported as 400 {"error", "error_description"}."""
        if self.status == 400:
            payload = self.json()
            if isinstance(payload, dict) and payload.get("error"):
                error = str(payload["error"])
                description = str(payload.get("error_description", ""))
                if error in UNAUTHORIZED_OAUTH_ERRORS:
                    raise UnauthorizedError(description or error)
                raise AuthenticationError(error, description)
        return self.raise_for_status()
