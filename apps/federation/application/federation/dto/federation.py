"""Federation DTOs."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class FederatedSignInRequest:
    """페더레이션 로그인 요청."""

    provider: str
    access_token: str | None


@dataclass(frozen=True, slots=True)
class ProfileSummary:
    """응답에 포함되는 프로필 요약."""

    email: str | None
    display_name: str | None
    avatar_url: str | None


@dataclass(frozen=True, slots=True)
class FederatedSignInResponse:
    """페더레이션 로그인 응답."""

    uid: str
    profile: ProfileSummary
    custom_token: str
    is_new_user: bool = False
