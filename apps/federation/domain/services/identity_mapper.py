"""IdentityMapper Domain Service.

순수 함수 서비스: I/O 없음, 결정적.
"""

from __future__ import annotations

from apps.federation.domain.enums.provider import Provider
from apps.federation.domain.value_objects.internal_identity import InternalIdentity


class IdentityMapper:
    """(provider, external_id) → InternalIdentity 매핑."""

    def map(self, provider: Provider | str, external_id: str) -> InternalIdentity:
        """내부 식별자를 생성합니다.

        Raises:
            InvalidExternalIdError: external_id가 비어 있음
            UnsupportedProviderError: 지원하지 않는 프로바이더
        """
        if not isinstance(provider, Provider):
            provider = Provider.parse(provider)
        return InternalIdentity(provider=provider, external_id=str(external_id or ""))
