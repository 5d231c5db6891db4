from __future__ import annotations

from typing import Protocol

from starlette.requests import Request

from src.app.domain.models.identity import Identity
from src.app.domain.models.task import Task


class TaskRepository(Protocol):
    """Repository contract for storing and listing tasks."""

    async def list_tasks(self) -> list[Task]:
        """Return every stored task in insertion order."""

    async def add_task(self, title: str) -> Task:
        """Assign the next identifier to a new task, store it and return it."""


class IdentityProvider(Protocol):
    """Source of the currently authenticated user."""

    async def current_user(self, request: Request) -> Identity | None:
        """Return the signed-in identity for ``request`` or ``None`` when anonymous."""

    async def close(self) -> None:
        """Release any resources held by the provider."""
