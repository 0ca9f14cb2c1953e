"""Parse webhook deliveries into typed events."""
from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Dict, Union

from ..core.types import known_or_unknown
from .events import EVENT_DEFINITIONS, WebhookEvent


@dataclass
class Webhook:
    id: str
    event: Union[WebhookEvent, str]
    data: Any

    @property
    def is_known(self) -> bool:
        return isinstance(self.event, WebhookEvent)


def parse_webhook(payload: Union[str, bytes, Dict[str, Any]]) -> Webhook:
    """
    Parse a webhook body.

    Unknown event names keep the raw string and the raw ``data`` dict.
    Malformed bodies raise ValueError.
    """
    if isinstance(payload, (str, bytes)):
        try:
            payload = json.loads(payload)
        except ValueError as exc:
            raise ValueError(f"Webhook body is not valid JSON: {exc}") from exc
    if not isinstance(payload, dict):
        raise ValueError("Webhook body must be a JSON object")

    try:
        webhook_id = payload["id"]
        event_name = payload["event"]
        raw_data = payload["data"]
    except KeyError as exc:
        raise ValueError(f"Webhook body is missing {exc.args[0]!r}") from exc

    event = known_or_unknown(WebhookEvent, event_name)
    parse_data = EVENT_DEFINITIONS.get(event) if isinstance(event, WebhookEvent) else None
    if parse_data is None:
        return Webhook(id=webhook_id, event=event, data=raw_data)
    try:
        data = parse_data(raw_data)
    except (KeyError, TypeError, AttributeError) as exc:
        raise ValueError(f"Invalid data for {event.value}: {exc!r}") from exc
    return Webhook(id=webhook_id, event=event, data=data)
