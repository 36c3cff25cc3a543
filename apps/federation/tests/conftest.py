"""Test Configuration and Fixtures.

pytest 설정 및 공통 픽스처.
"""

from __future__ import annotations

import asyncio
import logging
import os
from datetime import datetime, timezone
from typing import Any, Callable, Generator
from unittest.mock import AsyncMock, MagicMock, create_autospec

import ecs_logging
import httpx
import pytest

TEST_SIGNING_SECRET = "test-secret-key-for-testing-only"
TEST_ISSUER_EMAIL = "federation@test-project.iam.gserviceaccount.com"


# ============================================================
# Environment
# ============================================================


@pytest.fixture(scope="session", autouse=True)
def _test_env() -> Generator[None, None, None]:
    """Set test environment variables."""
    original = os.environ.copy()
    os.environ.update(
        {
            "FEDERATION_ENVIRONMENT": "test",
            "FEDERATION_REDIS_PROFILE_URL": "redis://localhost:6379/1",
            "FEDERATION_CUSTOM_TOKEN_ALGORITHM": "HS256",
            "FEDERATION_CUSTOM_TOKEN_SECRET_KEY": TEST_SIGNING_SECRET,
            "FEDERATION_CUSTOM_TOKEN_ISSUER_EMAIL": TEST_ISSUER_EMAIL,
        }
    )
    yield
    os.environ.clear()
    os.environ.update(original)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None, None, None]:
    """setup_logging 이 바꾼 루트 로거 상태를 테스트마다 되돌립니다."""
    root_logger = logging.getLogger()
    level = root_logger.level
    factory = logging.getLogRecordFactory()
    yield
    for handler in list(root_logger.handlers):
        if isinstance(handler.formatter, ecs_logging.StdlibFormatter):
            root_logger.removeHandler(handler)
    root_logger.setLevel(level)
    logging.setLogRecordFactory(factory)


# ============================================================
# Time Fixtures
# ============================================================


@pytest.fixture
def t0() -> datetime:
    """최초 로그인 시각."""
    return datetime(2025, 1, 1, 9, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def t1() -> datetime:
    """두 번째 로그인 시각."""
    return datetime(2025, 1, 2, 9, 30, 0, tzinfo=timezone.utc)


class MutableClock:
    """테스트에서 시각을 바꿀 수 있는 시계."""

    def __init__(self, now: datetime) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture
def clock(t0: datetime) -> MutableClock:
    return MutableClock(t0)


# ============================================================
# Fake Redis (Hash + MULTI/EXEC)
# ============================================================


class FakeRedisPipeline:
    """명령을 모아 두었다가 execute 시 한 번에 적용하는 트랜잭션 파이프라인."""

    def __init__(self, redis: "FakeRedis") -> None:
        self._redis = redis
        self._commands: list[tuple[str, tuple[Any, ...], dict[str, Any]]] = []

    async def __aenter__(self) -> "FakeRedisPipeline":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        self._commands.clear()

    def hset(self, key: str, *, mapping: dict[str, str]) -> "FakeRedisPipeline":
        self._commands.append(("hset", (key,), {"mapping": mapping}))
        return self

    def hsetnx(self, key: str, field: str, value: str) -> "FakeRedisPipeline":
        self._commands.append(("hsetnx", (key, field, value), {}))
        return self

    def hgetall(self, key: str) -> "FakeRedisPipeline":
        self._commands.append(("hgetall", (key,), {}))
        return self

    async def execute(self) -> list[Any]:
        # 다른 코루틴이 끼어들 기회를 준 뒤 원자적으로 적용
        await asyncio.sleep(0)
        results = [
            getattr(self._redis, f"_{name}")(*args, **kwargs)
            for name, args, kwargs in self._commands
        ]
        self._commands.clear()
        return results


class FakeRedis:
    """RedisProfileStore가 사용하는 명령만 구현한 메모리 Redis."""

    def __init__(self) -> None:
        self.hashes: dict[str, dict[str, str]] = {}

    def pipeline(self, transaction: bool = True) -> FakeRedisPipeline:
        return FakeRedisPipeline(self)

    def _hset(self, key: str, *, mapping: dict[str, str]) -> int:
        bucket = self.hashes.setdefault(key, {})
        added = len(set(mapping) - set(bucket))
        bucket.update(mapping)
        return added

    def _hsetnx(self, key: str, field: str, value: str) -> int:
        bucket = self.hashes.setdefault(key, {})
        if field in bucket:
            return 0
        bucket[field] = value
        return 1

    def _hgetall(self, key: str) -> dict[str, str]:
        return dict(self.hashes.get(key, {}))


@pytest.fixture
def fake_redis() -> FakeRedis:
    return FakeRedis()


# ============================================================
# Provider HTTP Fixtures
# ============================================================


@pytest.fixture
def make_transport() -> Callable[..., httpx.MockTransport]:
    """응답 본문/상태를 고정한 httpx MockTransport 생성기.

    호출된 요청은 transport.requests 에 기록됩니다.
    """

    def _make(
        json_body: Any = None,
        *,
        status_code: int = 200,
        text: str | None = None,
        error: Exception | None = None,
    ) -> httpx.MockTransport:
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            if error is not None:
                raise error
            if text is not None:
                return httpx.Response(status_code, text=text)
            return httpx.Response(status_code, json=json_body)

        transport = httpx.MockTransport(handler)
        transport.requests = requests  # type: ignore[attr-defined]
        return transport

    return _make


@pytest.fixture
def kakao_payload() -> dict[str, Any]:
    """Kakao /v2/user/me 응답."""
    return {
        "id": 555,
        "kakao_account": {
            "email": "kakao@example.com",
            "profile": {
                "nickname": "kakao-user",
                "profile_image_url": "https://k.kakaocdn.net/img.jpg",
            },
        },
    }


@pytest.fixture
def naver_payload() -> dict[str, Any]:
    """Naver /v1/nid/me 응답."""
    return {
        "resultcode": "00",
        "message": "success",
        "response": {
            "id": "12345",
            "email": "a@example.com",
            "nickname": "alice",
            "profile_image": "https://phinf.pstatic.net/alice.png",
            "gender": "F",
            "age": "20-29",
            "birthday": "10-01",
            "birthyear": "1995",
            "mobile": "010-0000-0000",
        },
    }


# ============================================================
# Mock Port Fixtures
# ============================================================


@pytest.fixture
def mock_provider_gateway() -> AsyncMock:
    """Mock ProviderGateway."""
    mock = AsyncMock()
    mock.verify = AsyncMock()
    return mock


@pytest.fixture
def mock_profile_store() -> AsyncMock:
    """Mock ProfileStore."""
    mock = AsyncMock()
    mock.upsert = AsyncMock()
    return mock


@pytest.fixture
def mock_token_issuer() -> MagicMock:
    """Mock CustomTokenIssuer."""
    from apps.federation.application.federation.ports import CustomTokenIssuer

    mock = create_autospec(CustomTokenIssuer, instance=True)
    mock.issue.return_value = "signed-custom-token"
    return mock
