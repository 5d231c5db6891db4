from __future__ import annotations

import logging
from urllib.parse import quote

import httpx
from starlette.requests import Request

from src.app.domain.exceptions import IdentityProviderError
from src.app.domain.models.identity import Identity
from src.app.domain.repositories import IdentityProvider
from src.app.infrastructure.identity.mappers import ClerkUserMapper

logger = logging.getLogger(__name__)

PROVIDER_NAME = "clerk"


class ClerkIdentityProvider(IdentityProvider):
    """Resolves the signed-in user through the Clerk Backend API."""

    def __init__(
        self,
        *,
        secret_key: str,
        api_url: str = "https://api.clerk.com/v1",
        user_id_header: str = "X-Clerk-User-Id",
        timeout_seconds: float = 5.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._user_id_header = user_id_header
        self._client = client or httpx.AsyncClient(
            base_url=api_url.rstrip("/"),
            headers={"Authorization": f"Bearer {secret_key}"},
            timeout=httpx.Timeout(timeout_seconds),
        )

    async def current_user(self, request: Request) -> Identity | None:
        user_id = request.headers.get(self._user_id_header, "").strip()
        if not user_id:
            return None
        try:
            response = await self._client.get(f"/users/{quote(user_id, safe='')}")
        except httpx.HTTPError as exc:
            raise IdentityProviderError(PROVIDER_NAME, str(exc)) from exc

        if response.status_code == 404:
            logger.warning("Clerk user not found", extra={"user_id": user_id})
            return None
        if response.is_error:
            raise IdentityProviderError(
                PROVIDER_NAME, f"unexpected status {response.status_code}"
            )

        try:
            return ClerkUserMapper.to_identity(response.json())
        except ValueError as exc:
            raise IdentityProviderError(PROVIDER_NAME, str(exc)) from exc

    async def close(self) -> None:
        await self._client.aclose()
