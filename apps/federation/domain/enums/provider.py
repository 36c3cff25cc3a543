"""Provider Enum."""

from __future__ import annotations

from enum import Enum

from apps.federation.domain.exceptions.validation import UnsupportedProviderError


class Provider(str, Enum):
    """외부 ID 프로바이더."""

    KAKAO = "kakao"
    NAVER = "naver"

    @classmethod
    def parse(cls, value: str) -> "Provider":
        """문자열을 Provider로 변환합니다.

        Raises:
            UnsupportedProviderError: 지원하지 않는 프로바이더
        """
        normalized = (value or "").strip().lower()
        try:
            return cls(normalized)
        except ValueError:
            raise UnsupportedProviderError(value) from None
