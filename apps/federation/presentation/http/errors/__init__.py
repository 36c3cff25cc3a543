"""HTTP error handling."""

from apps.federation.presentation.http.errors.handlers import register_exception_handlers
from apps.federation.presentation.http.errors.translators import translate_federation_error

__all__ = ["register_exception_handlers", "translate_federation_error"]
