"""Redis adapters."""

from apps.federation.infrastructure.persistence_redis.adapters.profile_store_redis import (
    RedisProfileStore,
)

__all__ = ["RedisProfileStore"]
