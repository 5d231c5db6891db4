from __future__ import annotations

from starlette.requests import Request

from src.app.domain.models.identity import Identity
from src.app.domain.repositories import IdentityProvider


class AnonymousIdentityProvider(IdentityProvider):
    """Provider used when no identity backend is configured."""

    async def current_user(self, request: Request) -> Identity | None:
        return None

    async def close(self) -> None:
        return None


class HeaderIdentityProvider(IdentityProvider):
    """
    Reads the user from headers set by an authenticating reverse proxy.
    Only deploy behind a proxy that strips these headers from client requests.
    """

    def __init__(
        self,
        *,
        user_id_header: str = "X-User-Id",
        username_header: str = "X-Username",
        email_header: str = "X-User-Email",
    ) -> None:
        self._user_id_header = user_id_header
        self._username_header = username_header
        self._email_header = email_header

    async def current_user(self, request: Request) -> Identity | None:
        user_id = request.headers.get(self._user_id_header, "").strip()
        if not user_id:
            return None
        username = request.headers.get(self._username_header, "").strip() or None
        raw_emails = request.headers.get(self._email_header, "")
        emails = [email.strip() for email in raw_emails.split(",") if email.strip()]
        return Identity(user_id=user_id, username=username, email_addresses=emails)

    async def close(self) -> None:
        return None
