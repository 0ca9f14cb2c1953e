"""
Webhook signature verification.
The ``WorkOS-Signature`` header reads ``t=<unix ms>, v1=<hex digest>``; the digest is
HMAC-SHA256 of ``"<t>.<raw body>"`` keyed with the endpoint's webhook secret.
"""

import hashlib
import hmac
import logging
import time
from typing import Optional, Tuple, Union

from ..core.errors import WorkOsError
from .webhook import Webhook, parse_webhook

logger = logging.getLogger(__name__)

DEFAULT_TOLERANCE_SECONDS = 180
SIGNATURE_HEADER = "WorkOS-Signature"


class WebhookVerificationError(WorkOsError):
    """Signature header is malformed, stale or does not match the body."""


def _parse_signature_header(sig_header: str) -> Tuple[str, str]:
    issued_at = signature = None
    for part in sig_header.split(","):
        key, _, value = part.strip().partition("=")
        if key == "t":
            issued_at = value
        elif key == "v1":
            signature = value
    if not issued_at or not signature:
        raise WebhookVerificationError(f"Malformed {SIGNATURE_HEADER} header")
    return issued_at, signature


def compute_signature(payload: Union[str, bytes], issued_at: str, secret: str) -> str:
    body = payload if isinstance(payload, bytes) else payload.encode("utf-8")
    message = issued_at.encode("utf-8") + b"." + body
    return hmac.new(secret.encode("utf-8"), message, hashlib.sha256).hexdigest()


def verify_header(
    payload: Union[str, bytes],
    sig_header: str,
    secret: str,
    tolerance: Optional[int] = DEFAULT_TOLERANCE_SECONDS,
    now: Optional[float] = None,
) -> None:
    issued_at, signature = _parse_signature_header(sig_header)

    try:
        issued_at_seconds = int(issued_at) / 1000
    except ValueError as exc:
        raise WebhookVerificationError(f"Invalid timestamp in {SIGNATURE_HEADER} header") from exc

    if tolerance is not None:
        current = time.time() if now is None else now
        if current - issued_at_seconds > tolerance:
            raise WebhookVerificationError("Webhook timestamp is outside the tolerance window")

    expected = compute_signature(payload, issued_at, secret)
    if not hmac.compare_digest(expected, signature):
        logger.warning("Rejected webhook with mismatching signature")
        raise WebhookVerificationError("Signature hash does not match the expected signature hash")


def construct_event(
    payload: Union[str, bytes],
    sig_header: str,
    secret: str,
    tolerance: Optional[int] = DEFAULT_TOLERANCE_SECONDS,
) -> Webhook:
    """Verify the signature, then parse the body."""
    verify_header(payload, sig_header, secret, tolerance)
    return parse_webhook(payload)
