"""Legacy Sign-in Routes.

기존 배포의 프로바이더별 엔드포인트 경로를 유지합니다.
"""

from fastapi import APIRouter, Depends

from apps.federation.application.federation.commands import FederatedSignInInteractor
from apps.federation.domain.enums import Provider
from apps.federation.presentation.http.controllers.federation.sign_in import (
    ERROR_RESPONSES,
    read_sign_in_body,
    sign_in,
)
from apps.federation.presentation.http.schemas.federation import (
    SignInRequest,
    SignInResponse,
)
from apps.federation.setup.dependencies import get_federated_sign_in_interactor

router = APIRouter()


@router.post(
    "/kakaoSignIn",
    response_model=SignInResponse,
    responses=ERROR_RESPONSES,
    summary="Kakao 로그인 (레거시 경로)",
)
async def kakao_sign_in(
    payload: SignInRequest = Depends(read_sign_in_body),
    interactor: FederatedSignInInteractor = Depends(get_federated_sign_in_interactor),
) -> SignInResponse:
    return await sign_in(Provider.KAKAO.value, payload, interactor)


@router.post(
    "/naverAuth",
    response_model=SignInResponse,
    responses=ERROR_RESPONSES,
    summary="Naver 로그인 (레거시 경로)",
)
async def naver_sign_in(
    payload: SignInRequest = Depends(read_sign_in_body),
    interactor: FederatedSignInInteractor = Depends(get_federated_sign_in_interactor),
) -> SignInResponse:
    return await sign_in(Provider.NAVER.value, payload, interactor)
