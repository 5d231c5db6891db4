from typing import Literal

from pydantic import ConfigDict
from pydantic_settings import BaseSettings

from src.app.domain.repositories import IdentityProvider
from src.app.infrastructure.identity.clerk import ClerkIdentityProvider
from src.app.infrastructure.identity.providers import (
    AnonymousIdentityProvider,
    HeaderIdentityProvider,
)


class IdentitySettings(BaseSettings):
    """Configuration for resolving the signed-in user."""
    IDENTITY_PROVIDER: Literal["anonymous", "header", "clerk"] = "anonymous"
    CLERK_SECRET_KEY: str | None = None
    CLERK_API_URL: str = "https://api.clerk.com/v1"
    CLERK_USER_ID_HEADER: str = "X-Clerk-User-Id"
    CLERK_TIMEOUT_SECONDS: float = 5.0

    model_config = ConfigDict(env_file=".env", extra="ignore")


def get_identity_settings() -> IdentitySettings:
    """Return a fresh identity settings instance."""
    return IdentitySettings()


def build_identity_provider(settings: IdentitySettings | None = None) -> IdentityProvider:
    """Create the identity provider selected by ``IDENTITY_PROVIDER``."""
    if settings is None:
        settings = get_identity_settings()
    if settings.IDENTITY_PROVIDER == "header":
        return HeaderIdentityProvider()
    if settings.IDENTITY_PROVIDER == "clerk":
        if not settings.CLERK_SECRET_KEY:
            raise RuntimeError("CLERK_SECRET_KEY must be set when IDENTITY_PROVIDER=clerk.")
        return ClerkIdentityProvider(
            secret_key=settings.CLERK_SECRET_KEY,
            api_url=settings.CLERK_API_URL,
            user_id_header=settings.CLERK_USER_ID_HEADER,
            timeout_seconds=settings.CLERK_TIMEOUT_SECONDS,
        )
    return AnonymousIdentityProvider()
