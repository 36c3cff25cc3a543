"""Federation Exceptions.

페더레이션 파이프라인의 실패 분류입니다.
각 예외 클래스가 곧 ``Failed(kind)`` 의 kind 입니다.
"""

from __future__ import annotations

from typing import Any

from apps.federation.application.common.exceptions.base import ApplicationError


class FederationError(ApplicationError):
    """페더레이션 파이프라인 실패 기본 예외."""

    kind: str = "FederationError"
    retryable: bool = False


class InputError(FederationError):
    """요청 페이로드 누락/오류. 외부 호출 및 저장 없음."""

    kind = "InputError"

    def __init__(self, reason: str = "accessToken missing") -> None:
        super().__init__(reason)


class ProviderAuthError(FederationError):
    """프로바이더가 토큰을 거부했거나 프로필이 불완전함."""

    kind = "ProviderAuthError"

    def __init__(self, provider: str, reason: str, detail: Any = None) -> None:
        self.provider = provider
        self.detail = detail
        super().__init__(reason)


class ProviderUnavailableError(FederationError):
    """프로바이더 통신 실패 (네트워크 오류, 타임아웃, 5xx)."""

    kind = "ProviderUnavailable"
    retryable = True

    def __init__(self, provider: str, reason: str, detail: Any = None) -> None:
        self.provider = provider
        self.detail = detail
        super().__init__(f"{provider} provider unavailable: {reason}")


class StoreError(FederationError):
    """프로필 저장소 실패. 변경 여부를 가정할 수 없음."""

    kind = "StoreError"
    retryable = True

    def __init__(self, reason: str = "Profile store unavailable") -> None:
        super().__init__(reason)


class TokenIssuanceError(FederationError):
    """커스텀 토큰 서명 실패. 요청 단위로 치명적."""

    kind = "TokenIssuanceError"

    def __init__(self, reason: str = "Custom token issuance failed") -> None:
        super().__init__(reason)
