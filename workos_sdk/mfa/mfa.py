"""Multi-factor authentication API: enroll factors, issue and verify challenges."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict, Optional

from ..core.errors import InvalidPhoneNumberError
from ..endpoints import endpoint_path
from .types import AuthenticationChallenge, AuthenticationFactor, EnrollFactorOptions, VerifyChallengeResponse

if TYPE_CHECKING:
    from ..client import WorkOs

logger = logging.getLogger(__name__)


class Mfa:
    def __init__(self, workos: "WorkOs"):
        self.workos = workos

    async def enroll_factor(self, options: EnrollFactorOptions) -> AuthenticationFactor:
        response = await self.workos.request(
            "POST", endpoint_path("auth_factors", "enroll"), json=options.to_body()
        )
        if response.status == 422:
            payload = response.json()
            if isinstance(payload, dict) and payload.get("code") == "invalid_phone_number":
                raise InvalidPhoneNumberError(payload.get("message") or "invalid phone number")
        response.raise_for_unauthorized_or_status()
        return response.parse(AuthenticationFactor.from_dict)

    async def challenge_factor(
        self,
        authentication_factor_id: str,
        sms_template: Optional[str] = None,
    ) -> AuthenticationChallenge:
        body: Dict[str, Any] = {}
        if sms_template:
            body["sms_template"] = sms_template
        response = await self.workos.request(
            "POST", endpoint_path("auth_factors", "challenge", id=authentication_factor_id), json=body
        )
        response.raise_for_unauthorized_or_status()
        return response.parse(AuthenticationChallenge.from_dict)

    async def verify_challenge(self, authentication_challenge_id: str, code: str) -> VerifyChallengeResponse:
        body = {"authentication_challenge_id": authentication_challenge_id, "code": code}
        response = await self.workos.request("POST", endpoint_path("auth_factors", "verify"), json=body)
        response.raise_for_unauthorized_or_status()
        return response.parse(VerifyChallengeResponse.from_dict)

    async def verify_factor(self, authentication_challenge_id: str, code: str) -> VerifyChallengeResponse:
        """Older name for verify_challenge."""
        logger.warning("verify_factor is deprecated; use verify_challenge")
        return await self.verify_challenge(authentication_challenge_id, code)
