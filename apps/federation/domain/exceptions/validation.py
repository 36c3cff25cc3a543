"""Validation Exceptions."""

from apps.federation.domain.exceptions.base import DomainError


class ValidationError(DomainError):
    """도메인 값 검증 실패."""


class InvalidExternalIdError(ValidationError):
    """프로바이더 사용자 ID가 비어 있음."""

    def __init__(self, provider: str) -> None:
        self.provider = provider
        super().__init__(f"External id is empty for provider: {provider}")


class UnsupportedProviderError(ValidationError):
    """지원하지 않는 프로바이더."""

    def __init__(self, provider: str) -> None:
        self.provider = provider
        super().__init__(f"Unsupported provider: {provider!r}")
