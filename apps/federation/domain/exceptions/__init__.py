"""Domain Exceptions."""

from apps.federation.domain.exceptions.base import DomainError
from apps.federation.domain.exceptions.validation import (
    InvalidExternalIdError,
    UnsupportedProviderError,
    ValidationError,
)

__all__ = [
    "DomainError",
    "ValidationError",
    "InvalidExternalIdError",
    "UnsupportedProviderError",
]
