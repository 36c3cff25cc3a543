"""ProfileStore Port."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from apps.federation.domain.entities import ProfileRecord
    from apps.federation.domain.value_objects import InternalIdentity


@dataclass(frozen=True)
class ProfileUpsertResult:
    """Upsert 결과. ``created`` 로 생성/갱신 분기를 명시합니다."""

    record: "ProfileRecord"
    created: bool


class ProfileStore(Protocol):
    """프로필 저장소 인터페이스.

    구현체:
        - RedisProfileStore (infrastructure/persistence_redis/)
    """

    async def upsert(
        self,
        identity: "InternalIdentity",
        fields: dict[str, Any],
    ) -> ProfileUpsertResult:
        """프로필을 병합 저장합니다.

        ``fields`` 의 키는 덮어쓰고 나머지 키는 유지합니다.
        ``createdAt`` 은 최초 쓰기에서 한 번만 설정되며, 이 조건부 쓰기는
        나머지 쓰기와 같은 원자 단위에서 수행되어야 합니다.

        Raises:
            StoreError: 저장소 I/O 실패
        """
        ...
