"""Application Settings.

env_prefix="FEDERATION_" 사용으로 FEDERATION_REDIS_PROFILE_URL 등의 환경변수 매핑.
서명 키와 서비스 계정 이메일은 기존 배포 환경의 FIREBASE_* 변수도 인식합니다.
"""

from functools import lru_cache
from typing import Optional

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from apps.federation.infrastructure.oauth.providers.kakao import KAKAO_PROFILE_URL
from apps.federation.infrastructure.oauth.providers.naver import NAVER_PROFILE_URL
from apps.federation.infrastructure.persistence_redis.constants import PROFILE_KEY_PREFIX
from apps.federation.infrastructure.security.custom_token_issuer import (
    FIREBASE_AUDIENCE,
    MAX_TTL_SECONDS,
)


class Settings(BaseSettings):
    """애플리케이션 설정.

    환경변수에서 자동으로 로드됩니다.

    예시:
        FEDERATION_REDIS_PROFILE_URL → redis_profile_url
        FIREBASE_PRIVATE_KEY → custom_token_private_key_pem
    """

    # Service
    app_name: str = "Federation API"
    service_name: str = "federation-api"
    service_version: str = "1.0.0"
    environment: str = "local"
    log_level: str = "INFO"
    cors_origins: str = "*"

    # Redis (profile documents)
    redis_profile_url: str = "redis://localhost:6379/0"
    profile_key_prefix: str = PROFILE_KEY_PREFIX

    # Providers
    provider_timeout_seconds: float = Field(default=5.0, gt=0)
    kakao_profile_url: str = KAKAO_PROFILE_URL
    naver_profile_url: str = NAVER_PROFILE_URL

    # Custom token
    custom_token_algorithm: str = "RS256"
    custom_token_private_key_pem: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices(
            "FEDERATION_CUSTOM_TOKEN_PRIVATE_KEY_PEM", "FIREBASE_PRIVATE_KEY"
        ),
    )
    custom_token_secret_key: Optional[str] = None
    custom_token_issuer_email: str = Field(
        default="federation-api@localhost",
        validation_alias=AliasChoices(
            "FEDERATION_CUSTOM_TOKEN_ISSUER_EMAIL", "FIREBASE_CLIENT_EMAIL"
        ),
    )
    custom_token_audience: str = FIREBASE_AUDIENCE
    custom_token_ttl_seconds: int = Field(default=MAX_TTL_SECONDS, ge=1, le=MAX_TTL_SECONDS)

    # OpenTelemetry
    otel_enabled: bool = False
    otel_service_name: str = Field(
        default="federation-api",
        validation_alias=AliasChoices("OTEL_SERVICE_NAME", "FEDERATION_OTEL_SERVICE_NAME"),
    )
    otel_exporter_endpoint: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices(
            "OTEL_EXPORTER_OTLP_ENDPOINT", "FEDERATION_OTEL_EXPORTER_ENDPOINT"
        ),
    )
    otel_sampling_rate: float = 1.0

    model_config = SettingsConfigDict(
        env_prefix="FEDERATION_",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
        populate_by_name=True,
    )

    @field_validator("custom_token_private_key_pem", mode="before")
    @classmethod
    def _unescape_newlines(cls, value: Optional[str]):
        """환경변수에 ``\\n`` 으로 저장된 PEM 줄바꿈을 복원합니다."""
        if isinstance(value, str):
            value = value.strip()
            if not value:
                return None
            return value.replace("\\n", "\n")
        return value

    @property
    def custom_token_signing_key(self) -> Optional[str]:
        """알고리즘에 맞는 서명 키 (RS*/ES* → PEM, HS* → secret)."""
        if self.custom_token_algorithm.upper().startswith("HS"):
            return self.custom_token_secret_key
        return self.custom_token_private_key_pem

    @property
    def cors_origin_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    """캐시된 Settings 인스턴스 반환 (FastAPI 공식 패턴)."""
    return Settings()
