"""Domain Enums."""

from apps.federation.domain.enums.provider import Provider

__all__ = ["Provider"]
