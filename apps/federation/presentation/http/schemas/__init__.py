"""HTTP Schemas."""

from apps.federation.presentation.http.schemas.federation import (
    ErrorResponse,
    ProfileSchema,
    SignInRequest,
    SignInResponse,
)

__all__ = ["ErrorResponse", "ProfileSchema", "SignInRequest", "SignInResponse"]
