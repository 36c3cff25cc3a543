"""Federation HTTP Schemas.

JSON 필드명은 기존 클라이언트와 호환되도록 camelCase를 사용합니다.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from apps.federation.application.federation.dto import FederatedSignInResponse


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SignInRequest(CamelModel):
    """페더레이션 로그인 요청."""

    access_token: str | None = Field(None, description="프로바이더 액세스 토큰")


class ProfileSchema(CamelModel):
    """프로필 요약."""

    email: str | None = Field(None, description="이메일")
    display_name: str | None = Field(None, description="표시 이름")
    avatar_url: str | None = Field(None, description="프로필 이미지 URL")


class SignInResponse(CamelModel):
    """페더레이션 로그인 응답."""

    ok: bool = Field(default=True, description="성공 여부")
    uid: str = Field(..., description="내부 식별자 (<provider>:<id>)")
    profile: ProfileSchema = Field(..., description="프로필 요약")
    custom_token: str = Field(..., description="세션 교환용 커스텀 토큰")

    @classmethod
    def from_result(cls, result: FederatedSignInResponse) -> "SignInResponse":
        return cls(
            uid=result.uid,
            profile=ProfileSchema(
                email=result.profile.email,
                display_name=result.profile.display_name,
                avatar_url=result.profile.avatar_url,
            ),
            custom_token=result.custom_token,
        )


class ErrorResponse(BaseModel):
    """에러 응답."""

    error: str = Field(..., description="에러 메시지")
    detail: Any = Field(None, description="프로바이더 원본 응답 (프로바이더 오류일 때)")
