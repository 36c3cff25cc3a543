"""User-info Client Implementation.

ProviderGateway 포트의 구현체입니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import httpx

from apps.federation.application.federation.exceptions import ProviderUnavailableError

if TYPE_CHECKING:
    from apps.federation.application.federation.ports import ExternalProfile
    from apps.federation.infrastructure.oauth.registry import ProviderRegistry

logger = logging.getLogger(__name__)


class UserInfoClientImpl:
    """사용자 정보 클라이언트 구현체.

    ProviderGateway 구현체. 요청당 외부 호출 한 번, 재시도와 캐시는 없습니다.
    """

    def __init__(
        self,
        registry: "ProviderRegistry",
        timeout_seconds: float,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Args:
            registry: 프로바이더 레지스트리
            timeout_seconds: HTTP 클라이언트 타임아웃 (설정에서 주입)
            transport: httpx 전송 계층 (테스트 주입용)
        """
        self._registry = registry
        self._timeout = timeout_seconds
        self._transport = transport

    async def verify(self, provider: str, access_token: str) -> "ExternalProfile":
        """액세스 토큰 검증 및 프로필 조회."""
        user_info_provider = self._registry.get(provider)

        try:
            async with httpx.AsyncClient(
                timeout=self._timeout, transport=self._transport
            ) as client:
                payload = await user_info_provider.fetch_user_info(
                    client=client,
                    access_token=access_token,
                )
        except httpx.TimeoutException as e:
            logger.warning(f"User-info request timed out: provider={provider}")
            raise ProviderUnavailableError(provider, "request timed out") from e
        except httpx.HTTPError as e:
            logger.warning(f"User-info request failed: provider={provider}, error={e}")
            raise ProviderUnavailableError(provider, str(e) or type(e).__name__) from e

        return user_info_provider.parse_profile(payload)
