from __future__ import annotations

import importlib
from collections.abc import Callable

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.app.domain.repositories import IdentityProvider, TaskRepository
from src.app.infrastructure.memory.repository import InMemoryTaskRepository

from tests.fakes import StubIdentityProvider


@pytest.fixture
def env_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    """Provide deterministic environment variables for the settings classes."""
    monkeypatch.setenv("APP_NAME", "Test API")
    monkeypatch.setenv("APP_VERSION", "0.1.0")
    monkeypatch.setenv("IDENTITY_PROVIDER", "anonymous")


@pytest.fixture
def task_repository() -> InMemoryTaskRepository:
    return InMemoryTaskRepository.with_seed_data()


@pytest.fixture
def identity_stub() -> StubIdentityProvider:
    return StubIdentityProvider()


def _patch_inject_instance(
    monkeypatch: pytest.MonkeyPatch,
    task_repository: TaskRepository,
    identity_provider: IdentityProvider,
) -> Callable[[object], object]:
    """Patch `inject.instance` to always return the stub dependencies."""
    import inject

    def fake_instance(interface: object) -> object:
        if interface is TaskRepository:
            return task_repository
        if interface is IdentityProvider:
            return identity_provider
        raise RuntimeError(f"Unexpected dependency request: {interface}")

    monkeypatch.setattr(inject, "instance", fake_instance)
    return fake_instance


@pytest.fixture
def api_client(
    env_settings: None,
    monkeypatch: pytest.MonkeyPatch,
    task_repository: InMemoryTaskRepository,
    identity_stub: StubIdentityProvider,
):
    """FastAPI test client with routes wired to a fresh repository and identity stub."""
    _patch_inject_instance(monkeypatch, task_repository, identity_stub)

    # Reload modules so module-level services pick up the patched injector.
    routes_module = importlib.reload(importlib.import_module("src.app.presentation.routes"))
    sidebar_module = importlib.reload(
        importlib.import_module("src.app.presentation.sidebar_routes")
    )

    app = FastAPI()
    app.include_router(routes_module.router)
    app.include_router(sidebar_module.router)
    client = TestClient(app)
    return client, task_repository, identity_stub
