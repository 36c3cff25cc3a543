"""User-info Provider Implementations."""

from apps.federation.infrastructure.oauth.client import UserInfoClientImpl
from apps.federation.infrastructure.oauth.providers import (
    KakaoUserInfoProvider,
    NaverUserInfoProvider,
    UserInfoProvider,
)
from apps.federation.infrastructure.oauth.registry import ProviderRegistry

__all__ = [
    "UserInfoProvider",
    "KakaoUserInfoProvider",
    "NaverUserInfoProvider",
    "ProviderRegistry",
    "UserInfoClientImpl",
]
