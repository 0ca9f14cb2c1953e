"""
Multi-factor authentication API.
"""

from .mfa import Mfa
from .types import (
    AuthenticationChallenge,
    AuthenticationFactor,
    AuthenticationFactorType,
    EnrollFactorOptions,
    SmsEnrollment,
    SmsFactor,
    TotpEnrollment,
    TotpFactor,
    VerifyChallengeResponse,
)

__all__ = [
    "AuthenticationChallenge",
    "AuthenticationFactor",
    "AuthenticationFactorType",
    "EnrollFactorOptions",
    "Mfa",
    "SmsEnrollment",
    "SmsFactor",
    "TotpEnrollment",
    "TotpFactor",
    "VerifyChallengeResponse",
]
