"""Kakao User-info Provider."""

from __future__ import annotations

from typing import Any

from apps.federation.application.federation.ports import ExternalProfile
from apps.federation.infrastructure.oauth.providers.base import (
    UserInfoProvider,
    as_optional_str,
)

KAKAO_PROFILE_URL = "https://kapi.kakao.com/v2/user/me"


class KakaoUserInfoProvider(UserInfoProvider):
    """Kakao 사용자 정보 프로바이더.

    성공 조건: 최상위 ``id`` 가 숫자 또는 비어 있지 않은 문자열.
    프로필 필드는 ``kakao_account`` / ``kakao_account.profile`` 아래에 있으며
    각각 선택 항목입니다.
    """

    name = "kakao"
    default_profile_url = KAKAO_PROFILE_URL

    def parse_profile(self, payload: Any) -> ExternalProfile:
        if not isinstance(payload, dict):
            raise self._reject(payload)

        kakao_id = payload.get("id")
        # bool은 int의 하위 타입
        if isinstance(kakao_id, bool) or not isinstance(kakao_id, (int, str)):
            raise self._reject(payload)
        external_id = str(kakao_id).strip()
        if not external_id:
            raise self._reject(payload)

        kakao_account = self._section(payload, payload, "kakao_account")
        profile = self._section(payload, kakao_account, "profile")
        nickname = as_optional_str(profile.get("nickname"))

        return ExternalProfile(
            provider=self.name,
            external_id=external_id,
            email=as_optional_str(kakao_account.get("email")),
            display_name=nickname,
            nickname=nickname,
            avatar_url=as_optional_str(profile.get("profile_image_url")),
        )
