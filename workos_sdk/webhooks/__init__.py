"""
Webhook payloads and signature verification.
"""

from .events import EVENT_DEFINITIONS, DirectoryGroupMembership, WebhookEvent
from .verification import (
    SIGNATURE_HEADER,
    WebhookVerificationError,
    compute_signature,
    construct_event,
    verify_header,
)
from .webhook import Webhook, parse_webhook

__all__ = [
    "EVENT_DEFINITIONS",
    "SIGNATURE_HEADER",
    "DirectoryGroupMembership",
    "Webhook",
    "WebhookEvent",
    "WebhookVerificationError",
    "compute_signature",
    "construct_event",
    "parse_webhook",
    "verify_header",
]
