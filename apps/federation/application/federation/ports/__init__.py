"""Federation ports.

페더레이션 파이프라인이 의존하는 인프라 포트입니다.
"""

from apps.federation.application.federation.ports.profile_store import (
    ProfileStore,
    ProfileUpsertResult,
)
from apps.federation.application.federation.ports.provider_gateway import (
    ExternalProfile,
    ProviderGateway,
)
from apps.federation.application.federation.ports.token_issuer import CustomTokenIssuer

__all__ = [
    "CustomTokenIssuer",
    "ExternalProfile",
    "ProfileStore",
    "ProfileUpsertResult",
    "ProviderGateway",
]
