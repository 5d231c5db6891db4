from __future__ import annotations

from typing import Any

from src.app.domain.models.identity import Identity


class ClerkUserMapper:
    @staticmethod
    def to_identity(payload: Any) -> Identity:
        if not isinstance(payload, dict):
            raise ValueError("Clerk user payload must be a JSON object.")
        user_id = payload.get("id")
        if not isinstance(user_id, str) or not user_id:
            raise ValueError("Clerk user payload is missing an id.")

        emails: list[str] = []
        primary: str | None = None
        primary_id = payload.get("primary_email_address_id")
        for entry in payload.get("email_addresses") or []:
            if not isinstance(entry, dict):
                continue
            address = entry.get("email_address")
            if not isinstance(address, str) or not address:
                continue
            emails.append(address)
            if primary_id is not None and entry.get("id") == primary_id:
                primary = address

        return Identity(
            user_id=user_id,
            username=payload.get("username") or None,
            email_addresses=emails,
            primary_email=primary,
        )
