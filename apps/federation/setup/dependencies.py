"""Dependency Injection Setup.

FastAPI Depends를 사용한 의존성 주입 설정입니다.
Redis 클라이언트와 프로바이더 레지스트리는 lifespan에서 생성되어
``app.state`` 에 보관되며, 모듈 전역 싱글톤을 두지 않습니다.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import Depends, Request

from apps.federation.setup.config import Settings, get_settings

if TYPE_CHECKING:
    import redis.asyncio as aioredis

    from apps.federation.infrastructure.oauth import ProviderRegistry


# ============================================================
# Infrastructure Dependencies
# ============================================================


def get_profile_redis(request: Request) -> "aioredis.Redis":
    """프로필 저장용 Redis 클라이언트 제공자."""
    return request.app.state.profile_redis


def get_provider_registry(request: Request) -> "ProviderRegistry":
    """ProviderRegistry 제공자."""
    return request.app.state.provider_registry


# ============================================================
# Gateway Dependencies (Adapters)
# ============================================================


def get_provider_gateway(
    registry: "ProviderRegistry" = Depends(get_provider_registry),
    settings: Settings = Depends(get_settings),
):
    """ProviderGateway 제공자."""
    from apps.federation.infrastructure.oauth import UserInfoClientImpl

    return UserInfoClientImpl(registry, timeout_seconds=settings.provider_timeout_seconds)


def get_profile_store(
    redis: "aioredis.Redis" = Depends(get_profile_redis),
    settings: Settings = Depends(get_settings),
):
    """ProfileStore 제공자."""
    from apps.federation.infrastructure.persistence_redis import RedisProfileStore

    return RedisProfileStore(redis, key_prefix=settings.profile_key_prefix)


def get_token_issuer(settings: Settings = Depends(get_settings)):
    """CustomTokenIssuer 제공자."""
    from apps.federation.infrastructure.security import JoseCustomTokenIssuer

    return JoseCustomTokenIssuer(
        issuer_email=settings.custom_token_issuer_email,
        signing_key=settings.custom_token_signing_key,
        algorithm=settings.custom_token_algorithm,
        audience=settings.custom_token_audience,
        ttl_seconds=settings.custom_token_ttl_seconds,
    )


def get_identity_mapper():
    """IdentityMapper 제공자."""
    from apps.federation.domain.services import IdentityMapper

    return IdentityMapper()


# ============================================================
# Use Case Dependencies
# ============================================================


def get_federated_sign_in_interactor(
    identity_mapper=Depends(get_identity_mapper),
    provider_gateway=Depends(get_provider_gateway),
    profile_store=Depends(get_profile_store),
    token_issuer=Depends(get_token_issuer),
):
    """FederatedSignInInteractor 제공자."""
    from apps.federation.application.federation.commands import FederatedSignInInteractor

    return FederatedSignInInteractor(
        identity_mapper=identity_mapper,
        provider_gateway=provider_gateway,
        profile_store=profile_store,
        token_issuer=token_issuer,
    )
