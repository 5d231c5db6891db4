from __future__ import annotations

from starlette.requests import Request

from src.app.domain.exceptions import IdentityProviderError
from src.app.domain.models.identity import Identity
from src.app.domain.repositories import IdentityProvider


class StubIdentityProvider(IdentityProvider):
    """Returns a fixed identity, or raises when ``error`` is set."""

    def __init__(
        self,
        identity: Identity | None = None,
        error: IdentityProviderError | None = None,
    ) -> None:
        self.identity = identity
        self.error = error
        self.calls = 0
        self.closed = False

    async def current_user(self, request: Request) -> Identity | None:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.identity

    async def close(self) -> None:
        self.closed = True
