"""Domain Services."""

from apps.federation.domain.services.identity_mapper import IdentityMapper

__all__ = ["IdentityMapper"]
