"""Redis Profile Store.

ProfileStore 포트의 구현체입니다.

Layout:
    key   = "{prefix}{uid}" (Redis Hash)
    field = 프로필 필드명, value = JSON 인코딩 값 (None → "null")

Atomicity:
    HSET(필드 + updatedAt), HSETNX(createdAt), HGETALL 을 하나의 MULTI/EXEC
    트랜잭션으로 실행합니다. HSETNX는 "없을 때만 쓰기"이므로 동시에 들어온
    최초 로그인 두 건 중 하나만 createdAt 을 기록합니다.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any, Callable

from redis.exceptions import RedisError

from apps.federation.application.federation.exceptions import StoreError
from apps.federation.application.federation.ports import ProfileUpsertResult
from apps.federation.domain.entities import (
    CREATED_AT_FIELD,
    UPDATED_AT_FIELD,
    ProfileRecord,
)
from apps.federation.infrastructure.persistence_redis.constants import PROFILE_KEY_PREFIX

if TYPE_CHECKING:
    import redis.asyncio as aioredis

    from apps.federation.domain.value_objects import InternalIdentity

logger = logging.getLogger(__name__)

RESERVED_FIELDS = frozenset({CREATED_AT_FIELD, UPDATED_AT_FIELD})


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class RedisProfileStore:
    """Redis Hash 기반 프로필 저장소.

    ProfileStore 구현체.
    """

    def __init__(
        self,
        redis: "aioredis.Redis",
        *,
        key_prefix: str = PROFILE_KEY_PREFIX,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._redis = redis
        self._key_prefix = key_prefix
        self._clock = clock

    def _key(self, identity: "InternalIdentity") -> str:
        return f"{self._key_prefix}{identity.value}"

    async def upsert(
        self,
        identity: "InternalIdentity",
        fields: dict[str, Any],
    ) -> ProfileUpsertResult:
        """프로필 병합 저장."""
        key = self._key(identity)
        now = self._clock().isoformat()

        mapping = {
            name: json.dumps(value, ensure_ascii=False)
            for name, value in fields.items()
            if name not in RESERVED_FIELDS
        }
        mapping[UPDATED_AT_FIELD] = json.dumps(now)

        try:
            async with self._redis.pipeline(transaction=True) as pipe:
                pipe.hset(key, mapping=mapping)
                pipe.hsetnx(key, CREATED_AT_FIELD, json.dumps(now))
                pipe.hgetall(key)
                _, created, raw = await pipe.execute()
        except RedisError as e:
            logger.error(f"Profile upsert failed: uid={identity.value}, error={e}")
            raise StoreError(f"Profile store write failed: {e}") from e

        record = self._to_record(identity, raw)
        return ProfileUpsertResult(record=record, created=bool(created))

    def _to_record(self, identity: "InternalIdentity", raw: dict[str, str]) -> ProfileRecord:
        try:
            document = {name: json.loads(value) for name, value in raw.items()}
            created_at = datetime.fromisoformat(document.pop(CREATED_AT_FIELD))
            updated_at = datetime.fromisoformat(document.pop(UPDATED_AT_FIELD))
        except (KeyError, TypeError, ValueError) as e:
            raise StoreError(f"Corrupted profile document: {identity.value}") from e

        return ProfileRecord(
            uid=identity.value,
            provider=document.pop("provider", identity.provider.value),
            external_id=document.pop("externalId", identity.external_id),
            created_at=created_at,
            updated_at=updated_at,
            fields=document,
        )
