"""RedisProfileStore 단위 테스트.

upsert 병합 규칙, createdAt 불변성, null 센티넬, 오류 분류를 테스트합니다.
"""

import asyncio
import json
from datetime import datetime, timezone
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from apps.federation.application.federation.exceptions import StoreError
from apps.federation.domain.enums import Provider
from apps.federation.domain.value_objects import InternalIdentity
from apps.federation.infrastructure.persistence_redis.adapters.profile_store_redis import (
    RedisProfileStore,
)
from apps.federation.infrastructure.persistence_redis.constants import PROFILE_KEY_PREFIX


@pytest.fixture
def naver_identity() -> InternalIdentity:
    return InternalIdentity(provider=Provider.NAVER, external_id="12345")


@pytest.fixture
def naver_fields() -> dict[str, Any]:
    return {
        "provider": "naver",
        "externalId": "12345",
        "email": "a@example.com",
        "displayName": "alice",
        "nickname": "alice",
        "avatarUrl": None,
    }


@pytest.fixture
def store(fake_redis, clock) -> RedisProfileStore:
    return RedisProfileStore(fake_redis, clock=clock)


class TestRedisProfileStoreUpsert:
    """upsert 테스트."""

    @pytest.mark.asyncio
    async def test_first_upsert_creates_record(
        self, store, fake_redis, naver_identity, naver_fields, t0
    ) -> None:
        """최초 로그인: createdAt == updatedAt == T0."""
        result = await store.upsert(naver_identity, naver_fields)

        assert result.created is True
        record = result.record
        assert record.uid == "naver:12345"
        assert record.provider == "naver"
        assert record.external_id == "12345"
        assert record.created_at == t0
        assert record.updated_at == t0
        assert record.email == "a@example.com"
        assert f"{PROFILE_KEY_PREFIX}naver:12345" in fake_redis.hashes

    @pytest.mark.asyncio
    async def test_second_upsert_keeps_created_at(
        self, store, clock, naver_identity, naver_fields, t0, t1
    ) -> None:
        """두 번째 로그인: nickname 갱신, createdAt 유지, updatedAt 갱신."""
        await store.upsert(naver_identity, naver_fields)

        clock.now = t1
        result = await store.upsert(naver_identity, {**naver_fields, "nickname": "alicia"})

        assert result.created is False
        assert result.record.fields["nickname"] == "alicia"
        assert result.record.created_at == t0
        assert result.record.updated_at == t1

    @pytest.mark.asyncio
    async def test_upsert_is_idempotent_except_updated_at(
        self, store, clock, naver_identity, naver_fields, t1
    ) -> None:
        first = (await store.upsert(naver_identity, naver_fields)).record
        clock.now = t1
        second = (await store.upsert(naver_identity, naver_fields)).record

        assert second.created_at == first.created_at
        assert second.fields == first.fields
        assert second.updated_at != first.updated_at

    @pytest.mark.asyncio
    async def test_missing_value_is_stored_as_null_sentinel(
        self, store, fake_redis
    ) -> None:
        """값이 없는 필드는 키 누락이 아니라 JSON null 로 저장."""
        identity = InternalIdentity(provider=Provider.KAKAO, external_id="555")

        result = await store.upsert(identity, {"provider": "kakao", "email": None})

        stored = fake_redis.hashes[f"{PROFILE_KEY_PREFIX}kakao:555"]
        assert stored["email"] == "null"
        assert "email" in result.record.fields
        assert result.record.email is None

    @pytest.mark.asyncio
    async def test_keys_not_in_fields_are_left_untouched(
        self, store, naver_identity, naver_fields
    ) -> None:
        """merge: 이번 upsert 에 없는 키는 그대로 유지."""
        await store.upsert(naver_identity, {**naver_fields, "mobile": "010-0000-0000"})

        result = await store.upsert(naver_identity, naver_fields)

        assert result.record.fields["mobile"] == "010-0000-0000"

    @pytest.mark.asyncio
    async def test_fields_cannot_overwrite_timestamps(
        self, store, naver_identity, naver_fields, t0
    ) -> None:
        result = await store.upsert(
            naver_identity,
            {**naver_fields, "createdAt": "1999-01-01T00:00:00+00:00"},
        )

        assert result.record.created_at == t0

    @pytest.mark.asyncio
    async def test_concurrent_first_upserts_write_created_at_once(
        self, fake_redis, naver_identity, naver_fields, t0, t1
    ) -> None:
        """동시에 들어온 최초 로그인 두 건 중 하나만 createdAt 을 기록."""
        store_a = RedisProfileStore(fake_redis, clock=lambda: t0)
        store_b = RedisProfileStore(fake_redis, clock=lambda: t1)

        result_a, result_b = await asyncio.gather(
            store_a.upsert(naver_identity, naver_fields),
            store_b.upsert(naver_identity, naver_fields),
        )

        assert [result_a.created, result_b.created].count(True) == 1
        assert result_a.record.created_at == result_b.record.created_at

    @pytest.mark.asyncio
    async def test_upsert_uses_single_transaction(self, naver_identity, naver_fields, t0) -> None:
        """HSET, HSETNX(createdAt), HGETALL 을 한 MULTI/EXEC 로 실행."""
        # Arrange
        pipe = MagicMock()
        pipe.__aenter__ = AsyncMock(return_value=pipe)
        pipe.__aexit__ = AsyncMock(return_value=None)
        pipe.execute = AsyncMock(
            return_value=[
                4,
                1,
                {
                    "provider": '"naver"',
                    "externalId": '"12345"',
                    "createdAt": json.dumps(t0.isoformat()),
                    "updatedAt": json.dumps(t0.isoformat()),
                },
            ]
        )
        redis = MagicMock()
        redis.pipeline.return_value = pipe
        store = RedisProfileStore(redis, key_prefix="profiles:", clock=lambda: t0)

        # Act
        await store.upsert(naver_identity, naver_fields)

        # Assert
        redis.pipeline.assert_called_once_with(transaction=True)
        key = "profiles:naver:12345"
        mapping = pipe.hset.call_args.kwargs["mapping"]
        assert pipe.hset.call_args.args == (key,)
        assert json.loads(mapping["updatedAt"]) == t0.isoformat()
        assert "createdAt" not in mapping
        pipe.hsetnx.assert_called_once_with(key, "createdAt", json.dumps(t0.isoformat()))
        pipe.hgetall.assert_called_once_with(key)
        pipe.execute.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_redis_failure_raises_store_error(self, naver_identity, naver_fields) -> None:
        pipe = MagicMock()
        pipe.__aenter__ = AsyncMock(return_value=pipe)
        pipe.__aexit__ = AsyncMock(return_value=None)
        pipe.execute = AsyncMock(side_effect=RedisConnectionError("connection refused"))
        redis = MagicMock()
        redis.pipeline.return_value = pipe
        store = RedisProfileStore(redis)

        with pytest.raises(StoreError):
            await store.upsert(naver_identity, naver_fields)


class TestRedisProfileStoreDocument:
    """저장 문서 복원 테스트."""

    @pytest.mark.asyncio
    async def test_corrupted_document_raises_store_error(
        self, store, fake_redis, naver_identity, naver_fields
    ) -> None:
        fake_redis.hashes[f"{PROFILE_KEY_PREFIX}naver:12345"] = {"legacy": "not-json"}

        with pytest.raises(StoreError):
            await store.upsert(naver_identity, naver_fields)

    @pytest.mark.asyncio
    async def test_timestamps_are_timezone_aware(self, store, naver_identity, naver_fields) -> None:
        result = await store.upsert(naver_identity, naver_fields)

        assert result.record.created_at.tzinfo == timezone.utc
        assert isinstance(result.record.updated_at, datetime)
