"""Domain Value Objects."""

from apps.federation.domain.value_objects.internal_identity import InternalIdentity

__all__ = ["InternalIdentity"]
