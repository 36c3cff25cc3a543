"""Custom Token Issuer.

CustomTokenIssuer 포트의 구현체입니다.
Firebase Auth ``signInWithCustomToken`` 이 받아들이는 형식의 JWT를 발급합니다.
"""

from __future__ import annotations

import time
from typing import Any

from jose import JOSEError, jwt

from apps.federation.application.federation.exceptions import TokenIssuanceError

FIREBASE_AUDIENCE = (
    "https://identitytoolkit.googleapis.com/google.identity.identitytoolkit.v1.IdentityToolkit"
)
MAX_TTL_SECONDS = 3600
MAX_UID_LENGTH = 128


class JoseCustomTokenIssuer:
    """python-jose 기반 커스텀 토큰 발급자.

    CustomTokenIssuer 구현체.
    """

    def __init__(
        self,
        *,
        issuer_email: str,
        signing_key: str | None,
        algorithm: str = "RS256",
        audience: str = FIREBASE_AUDIENCE,
        ttl_seconds: int = MAX_TTL_SECONDS,
    ) -> None:
        self._issuer_email = issuer_email
        self._signing_key = signing_key
        self._algorithm = algorithm
        self._audience = audience
        self._ttl_seconds = min(ttl_seconds, MAX_TTL_SECONDS)

    def _now_timestamp(self) -> int:
        """현재 UTC Unix timestamp 반환."""
        return int(time.time())

    def issue(
        self,
        uid: str,
        *,
        provider: str | None = None,
    ) -> str:
        """커스텀 토큰 발급."""
        if not uid or len(uid) > MAX_UID_LENGTH:
            raise TokenIssuanceError(
                f"uid must be a non-empty string of at most {MAX_UID_LENGTH} characters"
            )
        if not self._signing_key:
            raise TokenIssuanceError("Custom token signing key is not configured")

        now = self._now_timestamp()
        payload: dict[str, Any] = {
            "iss": self._issuer_email,
            "sub": self._issuer_email,
            "aud": self._audience,
            "iat": now,
            "exp": now + self._ttl_seconds,
            "uid": uid,
        }
        if provider:
            payload["claims"] = {"provider": provider}

        try:
            return jwt.encode(payload, self._signing_key, algorithm=self._algorithm)
        except (JOSEError, ValueError, TypeError) as e:
            raise TokenIssuanceError(f"Custom token signing failed: {e}") from e
