"""Sign-in Controller.

프로바이더 액세스 토큰 → 커스텀 토큰 교환 엔드포인트입니다.
"""

import json
import logging
from typing import Any

from fastapi import APIRouter, Depends, Request

from apps.federation.application.federation.commands import FederatedSignInInteractor
from apps.federation.application.federation.dto import FederatedSignInRequest
from apps.federation.presentation.http.schemas.federation import (
    ErrorResponse,
    SignInRequest,
    SignInResponse,
)
from apps.federation.setup.dependencies import get_federated_sign_in_interactor

logger = logging.getLogger(__name__)

router = APIRouter()

ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    400: {"model": ErrorResponse, "description": "accessToken 누락"},
    401: {"model": ErrorResponse, "description": "프로바이더가 토큰을 거부함"},
    405: {"model": ErrorResponse, "description": "POST 외 메서드"},
    500: {"model": ErrorResponse, "description": "프로바이더/저장소/서명 실패"},
}


async def read_sign_in_body(request: Request) -> SignInRequest:
    """요청 본문을 관대하게 파싱합니다. 파싱 불가한 본문은 토큰 누락으로 취급합니다."""
    raw = await request.body()
    try:
        body = json.loads(raw or b"{}")
    except ValueError:
        return SignInRequest()
    if not isinstance(body, dict):
        return SignInRequest()
    token = body.get("accessToken")
    return SignInRequest(access_token=token if isinstance(token, str) else None)


async def sign_in(
    provider: str,
    payload: SignInRequest,
    interactor: FederatedSignInInteractor,
) -> SignInResponse:
    result = await interactor.execute(
        FederatedSignInRequest(provider=provider, access_token=payload.access_token)
    )
    logger.info(f"Federated sign-in success: provider={provider}, uid={result.uid}")
    return SignInResponse.from_result(result)


@router.post(
    "/{provider}/sign-in",
    response_model=SignInResponse,
    responses=ERROR_RESPONSES,
    summary="프로바이더 토큰으로 로그인",
)
async def provider_sign_in(
    provider: str,
    payload: SignInRequest = Depends(read_sign_in_body),
    interactor: FederatedSignInInteractor = Depends(get_federated_sign_in_interactor),
) -> SignInResponse:
    """프로바이더 액세스 토큰을 검증하고 커스텀 토큰을 발급합니다.

    1. 프로바이더 사용자 정보 API로 토큰 검증
    2. 내부 식별자 매핑 (``<provider>:<id>``)
    3. 프로필 upsert
    4. 커스텀 토큰 발급
    """
    return await sign_in(provider, payload, interactor)
