"""CustomTokenIssuer Port.

커스텀 인증 토큰 발급을 위한 인터페이스입니다.
"""

from typing import Protocol


class CustomTokenIssuer(Protocol):
    """커스텀 토큰 발급자 인터페이스.

    구현체:
        - JoseCustomTokenIssuer (infrastructure/security/)
    """

    def issue(self, uid: str, *, provider: str | None = None) -> str:
        """uid를 subject로 하는 짧은 수명의 서명 토큰을 발급합니다.

        Args:
            uid: 내부 식별자 문자열
            provider: 하위 시스템용 provider 클레임 (선택)

        Returns:
            서명된 커스텀 토큰

        Raises:
            TokenIssuanceError: 서명 실패 (설정 오류 등)
        """
        ...
