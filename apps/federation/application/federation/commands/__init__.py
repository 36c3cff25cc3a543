"""Federation commands."""

from apps.federation.application.federation.commands.sign_in import (
    FederatedSignInInteractor,
    SignInStage,
)

__all__ = ["FederatedSignInInteractor", "SignInStage"]
