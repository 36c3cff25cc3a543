"""Federation exceptions."""

from apps.federation.application.federation.exceptions.federation import (
    FederationError,
    InputError,
    ProviderAuthError,
    ProviderUnavailableError,
    StoreError,
    TokenIssuanceError,
)

__all__ = [
    "FederationError",
    "InputError",
    "ProviderAuthError",
    "ProviderUnavailableError",
    "StoreError",
    "TokenIssuanceError",
]
