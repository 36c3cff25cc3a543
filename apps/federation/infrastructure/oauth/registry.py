"""Provider Registry."""

from __future__ import annotations

from typing import TYPE_CHECKING

from apps.federation.application.federation.exceptions import InputError
from apps.federation.infrastructure.oauth.providers import (
    KakaoUserInfoProvider,
    NaverUserInfoProvider,
    UserInfoProvider,
)

if TYPE_CHECKING:
    from apps.federation.setup.config import Settings


class ProviderRegistry:
    """이름으로 프로바이더 구현체를 찾습니다."""

    def __init__(self, providers: list[UserInfoProvider]) -> None:
        self._providers = {provider.name: provider for provider in providers}

    @classmethod
    def from_settings(cls, settings: "Settings") -> "ProviderRegistry":
        return cls(
            [
                KakaoUserInfoProvider(profile_url=settings.kakao_profile_url),
                NaverUserInfoProvider(profile_url=settings.naver_profile_url),
            ]
        )

    def get(self, provider: str) -> UserInfoProvider:
        try:
            return self._providers[provider]
        except KeyError:
            raise InputError(f"Unsupported provider: {provider!r}") from None
