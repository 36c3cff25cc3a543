"""ProviderGateway Port.

외부 프로바이더(Kakao, Naver)의 사용자 정보 API와 통신하는 Gateway 인터페이스입니다.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol


@dataclass(frozen=True)
class ExternalProfile:
    """정규화된 프로바이더 프로필. 요청마다 새로 만들어지며 캐시하지 않습니다.

    Attributes:
        provider: 프로바이더 이름
        external_id: 프로바이더가 발급한 사용자 ID (필수)
        email: 이메일
        display_name: 표시 이름
        nickname: 닉네임
        avatar_url: 프로필 이미지 URL
        extras: 프로바이더 전용 속성 (값이 없으면 None)
    """

    provider: str
    external_id: str
    email: str | None = None
    display_name: str | None = None
    nickname: str | None = None
    avatar_url: str | None = None
    extras: dict[str, Any] = field(default_factory=dict)

    def to_fields(self) -> dict[str, Any]:
        """저장 레이아웃의 프로필 필드. 값이 없는 키도 None으로 포함합니다."""
        return {
            "provider": self.provider,
            "externalId": self.external_id,
            "email": self.email,
            "displayName": self.display_name,
            "nickname": self.nickname,
            "avatarUrl": self.avatar_url,
            **self.extras,
        }


class ProviderGateway(Protocol):
    """프로바이더 Gateway 인터페이스.

    구현체:
        - UserInfoClientImpl (infrastructure/oauth/)
    """

    async def verify(self, provider: str, access_token: str) -> ExternalProfile:
        """액세스 토큰으로 사용자 정보를 조회하고 검증합니다.

        Args:
            provider: 프로바이더 이름
            access_token: 프로바이더가 발급한 Bearer 토큰

        Returns:
            정규화된 프로필

        Raises:
            ProviderAuthError: 프로바이더가 토큰을 거부함
            ProviderUnavailableError: 네트워크 오류 또는 타임아웃
        """
        ...
