"""ProfileRecord Entity.

저장소와 분리된 순수 도메인 엔티티입니다.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

CREATED_AT_FIELD = "createdAt"
UPDATED_AT_FIELD = "updatedAt"


@dataclass
class ProfileRecord:
    """InternalIdentity 당 하나씩 저장되는 프로필 문서.

    Attributes:
        uid: 내부 식별자 문자열 (문서 키)
        provider: 프로바이더 이름
        external_id: 프로바이더가 발급한 사용자 ID
        fields: 정규화된 프로필 필드 (값이 없으면 None, 키는 항상 존재)
        created_at: 최초 upsert 시각 (이후 불변)
        updated_at: 마지막 upsert 시각
    """

    uid: str
    provider: str
    external_id: str
    created_at: datetime
    updated_at: datetime
    fields: dict[str, Any] = field(default_factory=dict)

    @property
    def email(self) -> str | None:
        return self.fields.get("email")

    @property
    def display_name(self) -> str | None:
        return self.fields.get("displayName")

    @property
    def avatar_url(self) -> str | None:
        return self.fields.get("avatarUrl")
