import inject

from src.app.domain.repositories import IdentityProvider, TaskRepository
from src.app.infrastructure.memory.repository import InMemoryTaskRepository
from src.setup.api_config import ApiSettings, get_api_settings
from src.setup.identity_config import IdentitySettings, build_identity_provider


def build_task_repository(settings: ApiSettings | None = None) -> InMemoryTaskRepository:
    """Create the process-wide task store, seeded unless SEED_TASKS is false."""
    if settings is None:
        settings = get_api_settings()
    if settings.SEED_TASKS:
        return InMemoryTaskRepository.with_seed_data()
    return InMemoryTaskRepository()


def configure_di(
    api_settings: ApiSettings | None = None,
    identity_settings: IdentitySettings | None = None,
) -> None:
    """Bind repositories into the DI container, replacing any previous bindings."""
    task_repository = build_task_repository(api_settings)
    identity_provider = build_identity_provider(identity_settings)

    def _config(binder: inject.Binder) -> None:
        binder.bind(TaskRepository, task_repository)
        binder.bind(IdentityProvider, identity_provider)

    inject.clear_and_configure(_config)
