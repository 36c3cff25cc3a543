"""InternalIdentity Value Object."""

from __future__ import annotations

from dataclasses import dataclass

from apps.federation.domain.enums.provider import Provider
from apps.federation.domain.exceptions.validation import InvalidExternalIdError

SEPARATOR = ":"


@dataclass(frozen=True, slots=True)
class InternalIdentity:
    """프로바이더 네임스페이스가 붙은 내부 식별자.

    문자열 표현 ``<provider>:<external_id>`` 는 프로필 문서 키이자
    커스텀 토큰의 subject(uid)로 사용됩니다.
    프로바이더 접두어 덕분에 서로 다른 프로바이더가 같은 원시 ID를
    발급하더라도 충돌하지 않습니다.
    """

    provider: Provider
    external_id: str

    def __post_init__(self) -> None:
        if not self.external_id:
            raise InvalidExternalIdError(self.provider.value)

    @property
    def value(self) -> str:
        return f"{self.provider.value}{SEPARATOR}{self.external_id}"

    def __str__(self) -> str:
        return self.value
