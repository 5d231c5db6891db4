from __future__ import annotations

import logging
from typing import cast

import inject
from starlette.requests import Request

from src.app.domain.exceptions import IdentityProviderError
from src.app.domain.models import (
    FooterLink,
    Identity,
    ProfileCard,
    SidebarView,
    SuggestedUser,
    TrendingTopic,
)
from src.app.domain.repositories import IdentityProvider

logger = logging.getLogger(__name__)

TRENDING_TOPICS = (
    TrendingTopic(tag="#WebDevelopment", post_count=1234),
    TrendingTopic(tag="#NextJS", post_count=892),
    TrendingTopic(tag="#React", post_count=756),
)

SUGGESTED_USERS = tuple(SuggestedUser(name=f"User {i}", handle=f"user{i}") for i in (1, 2, 3))

FOOTER_LINKS = (
    FooterLink(label="About", href="/about"),
    FooterLink(label="Help", href="/help"),
    FooterLink(label="Privacy", href="/privacy"),
    FooterLink(label="Terms", href="/terms"),
)


def build_profile_card(identity: Identity) -> ProfileCard:
    handle = identity.display_handle
    return ProfileCard(
        handle=handle,
        email=identity.primary_email_address or "",
        profile_url=f"/profile/{handle}",
    )


class SidebarService:
    """Assembles the sidebar for the current visitor."""

    def __init__(self, identity_provider: IdentityProvider | None = None) -> None:
        if identity_provider is None:
            identity_provider = cast(IdentityProvider, inject.instance(IdentityProvider))
        self._identity_provider = identity_provider

    async def current_identity(self, request: Request) -> Identity | None:
        try:
            return await self._identity_provider.current_user(request)
        except IdentityProviderError as exc:
            logger.error(
                "Identity lookup failed, rendering anonymous sidebar",
                extra={"provider": exc.provider, "reason": exc.reason},
            )
            return None

    async def build(self, request: Request) -> SidebarView:
        identity = await self.current_identity(request)
        profile = build_profile_card(identity) if identity is not None else None
        return SidebarView(
            profile=profile,
            trending=list(TRENDING_TOPICS),
            suggested=list(SUGGESTED_USERS),
            footer_links=list(FOOTER_LINKS),
        )
