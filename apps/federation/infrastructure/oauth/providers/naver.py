"""Naver User-info Provider."""

from __future__ import annotations

from typing import Any

from apps.federation.application.federation.ports import ExternalProfile
from apps.federation.infrastructure.oauth.providers.base import (
    UserInfoProvider,
    as_optional_str,
)

NAVER_PROFILE_URL = "https://openapi.naver.com/v1/nid/me"
NAVER_SUCCESS_RESULT_CODE = "00"

# 저장 필드명 ← 응답 필드명
NAVER_EXTRA_FIELDS = {
    "name": "name",
    "gender": "gender",
    "ageRange": "age",
    "birthday": "birthday",
    "birthyear": "birthyear",
    "mobile": "mobile",
}


class NaverUserInfoProvider(UserInfoProvider):
    """Naver 사용자 정보 프로바이더.

    성공 조건: ``resultcode == "00"`` 이고 ``response.id`` 가 비어 있지 않음.
    """

    name = "naver"
    default_profile_url = NAVER_PROFILE_URL

    def parse_profile(self, payload: Any) -> ExternalProfile:
        if not isinstance(payload, dict):
            raise self._reject(payload)

        result_code = payload.get("resultcode")
        if result_code != NAVER_SUCCESS_RESULT_CODE:
            raise self._reject(
                payload,
                f"Invalid Naver access token "
                f"(resultcode={result_code}, message={payload.get('message')})",
            )

        data = self._section(payload, payload, "response")
        external_id = as_optional_str(data.get("id"))
        if not external_id:
            raise self._reject(payload, "Naver response is missing user id")

        name = as_optional_str(data.get("name"))
        nickname = as_optional_str(data.get("nickname"))

        return ExternalProfile(
            provider=self.name,
            external_id=external_id,
            email=as_optional_str(data.get("email")),
            display_name=name or nickname,
            nickname=nickname,
            avatar_url=as_optional_str(data.get("profile_image")),
            extras={
                stored: as_optional_str(data.get(source))
                for stored, source in NAVER_EXTRA_FIELDS.items()
            },
        )
