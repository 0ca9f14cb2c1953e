"""Multi-factor authentication factors and challenges."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional, Union

from ..core.types import Timestamps, known_or_unknown, parse_optional_timestamp


class AuthenticationFactorType(str, Enum):
    TOTP = "totp"
    SMS = "sms"


@dataclass
class TotpEnrollment:
    """Enroll an authenticator app."""

    issuer: str
    user: str

    def to_body(self) -> Dict[str, Any]:
        return {"type": "totp", "totp_issuer": self.issuer, "totp_user": self.user}


@dataclass
class SmsEnrollment:
    phone_number: str

    def to_body(self) -> Dict[str, Any]:
        return {"type": "sms", "phone_number": self.phone_number}


EnrollFactorOptions = Union[TotpEnrollment, SmsEnrollment]


@dataclass
class TotpFactor:
    qr_code: str
    secret: str
    uri: str


@dataclass
class SmsFactor:
    phone_number: str


@dataclass
class AuthenticationFactor:
    id: str
    type: Union[AuthenticationFactorType, str]
    timestamps: Timestamps
    totp: Optional[TotpFactor] = None
    sms: Optional[SmsFactor] = None

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "AuthenticationFactor":
        totp = payload.get("totp")
        sms = payload.get("sms")
        return cls(
            id=payload["id"],
            type=known_or_unknown(AuthenticationFactorType, payload["type"]),
            timestamps=Timestamps.from_dict(payload),
            totp=TotpFactor(qr_code=totp.get("qr_code", ""), secret=totp.get("secret", ""), uri=totp.get("uri", ""))
            if totp
            else None,
            sms=SmsFactor(phone_number=sms["phone_number"]) if sms else None,
        )


@dataclass
class AuthenticationChallenge:
    id: str
    authentication_factor_id: str
    timestamps: Timestamps
    expires_at: Optional[datetime] = None
    code: Optional[str] = None

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "AuthenticationChallenge":
        return cls(
            id=payload["id"],
            authentication_factor_id=payload["authentication_factor_id"],
            timestamps=Timestamps.from_dict(payload),
            expires_at=parse_optional_timestamp(payload.get("expires_at")),
            code=payload.get("code"),
        )


@dataclass
class VerifyChallengeResponse:
    challenge: AuthenticationChallenge
    is_valid: bool

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "VerifyChallengeResponse":
        return cls(
            challenge=AuthenticationChallenge.from_dict(payload["challenge"]),
            is_valid=bool(payload["valid"]),
        )
