"""Federation DTOs."""

from apps.federation.application.federation.dto.federation import (
    FederatedSignInRequest,
    FederatedSignInResponse,
    ProfileSummary,
)

__all__ = [
    "FederatedSignInRequest",
    "FederatedSignInResponse",
    "ProfileSummary",
]
