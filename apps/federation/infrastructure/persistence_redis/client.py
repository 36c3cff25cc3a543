"""Redis Client Factory.

프로필 저장소용 비동기 Redis 클라이언트를 생성합니다.
클라이언트는 애플리케이션 lifespan에서 명시적으로 만들고 닫습니다.

Retry 설정:
    - 명령 단위 재시도 없음 (retries=0)
      upsert 는 MULTI/EXEC 트랜잭션이므로, EXEC 응답 유실 후 재전송하면
      두 번째 실행의 HSETNX 결과(0)가 최초 로그인을 기존 사용자로 보고합니다.
      연결 오류는 StoreError 로 호출자에게 전달되며 재시도는 호출자 몫입니다.
    - health_check_interval: 30초마다 연결 상태 확인
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from redis.asyncio.retry import Retry
from redis.backoff import NoBackoff

if TYPE_CHECKING:
    import redis.asyncio as aioredis

HEALTH_CHECK_INTERVAL = 30  # seconds
MAX_CONNECTIONS = 50
SOCKET_CONNECT_TIMEOUT = 5.0  # seconds
SOCKET_TIMEOUT = 5.0  # seconds
MAX_RETRIES = 0


def build_async_client(redis_url: str) -> "aioredis.Redis":
    """비동기 Redis 클라이언트 생성.

    Key configurations:
    - socket_keepalive: 네트워크 비활성으로 인한 연결 끊김 방지
    - retry: 단일 시도 (트랜잭션 재전송 금지)
    - max_connections: 연결 풀 크기 제한
    """
    import redis.asyncio as aioredis

    retry = Retry(NoBackoff(), retries=MAX_RETRIES)

    return aioredis.from_url(
        redis_url,
        encoding="utf-8",
        decode_responses=True,
        health_check_interval=HEALTH_CHECK_INTERVAL,
        socket_keepalive=True,
        socket_connect_timeout=SOCKET_CONNECT_TIMEOUT,
        socket_timeout=SOCKET_TIMEOUT,
        max_connections=MAX_CONNECTIONS,
        retry=retry,
    )
