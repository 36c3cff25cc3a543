"""Security adapters."""

from apps.federation.infrastructure.security.custom_token_issuer import (
    FIREBASE_AUDIENCE,
    JoseCustomTokenIssuer,
)

__all__ = ["FIREBASE_AUDIENCE", "JoseCustomTokenIssuer"]
