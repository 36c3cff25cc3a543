"""User-info Provider Base Class."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from apps.federation.application.federation.exceptions import (
    ProviderAuthError,
    ProviderUnavailableError,
)

if TYPE_CHECKING:
    import httpx

    from apps.federation.application.federation.ports import ExternalProfile

logger = logging.getLogger(__name__)


class UserInfoProvider(ABC):
    """사용자 정보 API 프로바이더 추상 클래스.

    HTTP 상태 코드만으로 성공을 판단하지 않습니다.
    성공 조건은 각 프로바이더의 ``parse_profile`` 에서 명시적으로 검사합니다.
    """

    name: str
    default_profile_url: str

    def __init__(self, *, profile_url: str | None = None) -> None:
        self.profile_url = profile_url or self.default_profile_url

    async def fetch_user_info(
        self,
        *,
        client: "httpx.AsyncClient",
        access_token: str,
    ) -> Any:
        """Bearer 토큰으로 사용자 정보 API를 한 번 호출합니다.

        Raises:
            ProviderAuthError: 응답 본문이 JSON이 아님 (4xx 등)
            ProviderUnavailableError: 응답 본문이 JSON이 아닌 5xx
        """
        headers = {"Authorization": f"Bearer {access_token}"}
        response = await client.get(self.profile_url, headers=headers)
        try:
            return response.json()
        except ValueError:
            if response.status_code >= 500:
                raise ProviderUnavailableError(
                    self.name,
                    f"upstream status {response.status_code}",
                    detail=response.text,
                ) from None
            raise ProviderAuthError(
                self.name,
                f"Invalid {self.name.capitalize()} access token",
                detail=response.text,
            ) from None

    @abstractmethod
    def parse_profile(self, payload: Any) -> "ExternalProfile":
        """응답 본문을 정규화된 프로필로 변환합니다.

        Raises:
            ProviderAuthError: 성공 조건 불충족
        """
        raise NotImplementedError

    def _section(self, payload: Any, container: dict, key: str) -> dict:
        """선택 하위 객체를 꺼냅니다. 없으면 빈 dict, 객체가 아니면 거부합니다."""
        value = container.get(key)
        if value is None:
            return {}
        if not isinstance(value, dict):
            raise self._reject(payload, f"Malformed {self.name.capitalize()} response: {key}")
        return value

    def _reject(self, payload: Any, reason: str | None = None) -> ProviderAuthError:
        return ProviderAuthError(
            self.name,
            reason or f"Invalid {self.name.capitalize()} access token",
            detail=payload,
        )


def as_optional_str(value: Any) -> str | None:
    """빈 값은 None으로, 나머지는 문자열로 정규화합니다."""
    if value is None or value == "":
        return None
    return str(value)
