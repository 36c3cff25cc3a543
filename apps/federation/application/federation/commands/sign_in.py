"""FederatedSignIn Command.

외부 프로바이더 액세스 토큰으로 페더레이션 로그인을 처리하는 Use Case입니다.

Architecture:
    - UseCase(지휘자): FederatedSignInInteractor
    - Domain Service: IdentityMapper (순수 함수)
    - Ports(인프라): ProviderGateway, ProfileStore, CustomTokenIssuer

State machine:
    START → VERIFYING → MAPPING → UPSERTING → ISSUING → DONE
    어느 단계에서든 Failed(kind) 로 종료되며 자동 재시도는 없습니다.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING

from apps.federation.application.federation.dto import (
    FederatedSignInRequest,
    FederatedSignInResponse,
    ProfileSummary,
)
from apps.federation.application.federation.exceptions import (
    FederationError,
    InputError,
    ProviderAuthError,
    ProviderUnavailableError,
)
from apps.federation.domain.enums import Provider
from apps.federation.domain.exceptions import (
    InvalidExternalIdError,
    UnsupportedProviderError,
)

if TYPE_CHECKING:
    # Domain Service
    from apps.federation.domain.services import IdentityMapper

    # Ports (인프라)
    from apps.federation.application.federation.ports import (
        CustomTokenIssuer,
        ProfileStore,
        ProviderGateway,
    )

logger = logging.getLogger(__name__)


class SignInStage(str, Enum):
    """파이프라인 단계."""

    START = "start"
    VERIFYING = "verifying"
    MAPPING = "mapping"
    UPSERTING = "upserting"
    ISSUING = "issuing"
    DONE = "done"


class FederatedSignInInteractor:
    """페더레이션 로그인 Interactor (지휘자).

    Workflow:
        1. 입력 검증 (provider, access_token) - 실패 시 외부 호출 없음
        2. 프로바이더 토큰 검증 및 프로필 조회 (ProviderGateway)
        3. 내부 식별자 매핑 (IdentityMapper)
        4. 프로필 upsert (ProfileStore)
        5. 커스텀 토큰 발급 (CustomTokenIssuer)

    각 단계의 실패는 분류된 FederationError로 한 번만 호출자에게 전달됩니다.
    """

    def __init__(
        self,
        # Domain Service
        identity_mapper: "IdentityMapper",
        # Ports (인프라)
        provider_gateway: "ProviderGateway",
        profile_store: "ProfileStore",
        token_issuer: "CustomTokenIssuer",
    ) -> None:
        self._identity_mapper = identity_mapper
        self._provider_gateway = provider_gateway
        self._profile_store = profile_store
        self._token_issuer = token_issuer

    async def execute(self, request: FederatedSignInRequest) -> FederatedSignInResponse:
        """페더레이션 로그인을 처리합니다.

        Args:
            request: 로그인 요청 DTO

        Returns:
            uid, 프로필 요약, 커스텀 토큰

        Raises:
            InputError: provider 또는 access_token 누락
            ProviderAuthError: 프로바이더가 토큰을 거부함
            ProviderUnavailableError: 프로바이더 통신 실패
            StoreError: 프로필 저장 실패
            TokenIssuanceError: 토큰 서명 실패
        """
        stage = SignInStage.START
        try:
            provider = self._validate(request)

            stage = SignInStage.VERIFYING
            profile = await self._provider_gateway.verify(
                provider.value, request.access_token or ""
            )

            stage = SignInStage.MAPPING
            try:
                identity = self._identity_mapper.map(provider, profile.external_id)
            except InvalidExternalIdError as e:
                raise ProviderAuthError(
                    provider.value, "Provider returned an empty user id"
                ) from e

            stage = SignInStage.UPSERTING
            upsert = await self._profile_store.upsert(identity, profile.to_fields())
            record = upsert.record

            stage = SignInStage.ISSUING
            custom_token = self._token_issuer.issue(identity.value, provider=provider.value)
        except FederationError as e:
            self._log_failure(request, stage, e)
            raise

        logger.info(
            "Federated sign-in successful",
            extra={
                "uid": identity.value,
                "provider": provider.value,
                "is_new_user": upsert.created,
            },
        )

        return FederatedSignInResponse(
            uid=identity.value,
            profile=ProfileSummary(
                email=record.email,
                display_name=record.display_name,
                avatar_url=record.avatar_url,
            ),
            custom_token=custom_token,
            is_new_user=upsert.created,
        )

    def _validate(self, request: FederatedSignInRequest) -> Provider:
        if not request.access_token or not request.access_token.strip():
            raise InputError("accessToken missing")
        try:
            return Provider.parse(request.provider)
        except UnsupportedProviderError as e:
            raise InputError(e.message) from e

    def _log_failure(
        self,
        request: FederatedSignInRequest,
        stage: SignInStage,
        exc: FederationError,
    ) -> None:
        extra = {
            "provider": request.provider,
            "stage": stage.value,
            "kind": exc.kind,
        }
        summary = f"kind={exc.kind}, stage={stage.value}, provider={request.provider}"
        if isinstance(exc, (ProviderAuthError, ProviderUnavailableError)):
            extra["detail"] = exc.detail
            summary += f", detail={exc.detail!r}"

        if isinstance(exc, InputError):
            logger.info(f"Federated sign-in rejected: {exc.message} ({summary})", extra=extra)
        elif exc.retryable or isinstance(exc, ProviderAuthError):
            logger.warning(f"Federated sign-in failed: {exc.message} ({summary})", extra=extra)
        else:
            logger.error(f"Federated sign-in failed: {exc.message} ({summary})", extra=extra)
