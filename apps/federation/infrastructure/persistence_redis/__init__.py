"""Redis persistence."""

from apps.federation.infrastructure.persistence_redis.adapters import RedisProfileStore
from apps.federation.infrastructure.persistence_redis.client import build_async_client

__all__ = ["RedisProfileStore", "build_async_client"]
