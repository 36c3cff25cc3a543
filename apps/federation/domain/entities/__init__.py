"""Domain Entities."""

from apps.federation.domain.entities.profile_record import (
    CREATED_AT_FIELD,
    UPDATED_AT_FIELD,
    ProfileRecord,
)

__all__ = ["ProfileRecord", "CREATED_AT_FIELD", "UPDATED_AT_FIELD"]
