"""User-info Providers.

각 프로바이더 구현체입니다.
"""

from apps.federation.infrastructure.oauth.providers.base import UserInfoProvider
from apps.federation.infrastructure.oauth.providers.kakao import KakaoUserInfoProvider
from apps.federation.infrastructure.oauth.providers.naver import NaverUserInfoProvider

__all__ = [
    "UserInfoProvider",
    "KakaoUserInfoProvider",
    "NaverUserInfoProvider",
]
