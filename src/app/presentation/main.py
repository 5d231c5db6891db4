from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import inject
from fastapi import FastAPI

from src.app.domain.repositories import IdentityProvider
from src.setup.api_config import get_api_settings
from src.setup.app_config import configure_di
from src.setup.logging_config import configure_logging

settings = get_api_settings()
configure_logging(settings.LOG_LEVEL)
configure_di(settings)


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncIterator[None]:
    yield
    await inject.instance(IdentityProvider).close()


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Task list API and sidebar for the Socially app",
    lifespan=lifespan,
)


@app.get("/health", tags=["health"])
async def health() -> dict[str, str]:
    return {"status": "ok"}


from src.app.presentation.routes import router as api_router  # noqa: E402
from src.app.presentation.sidebar_routes import router as sidebar_router  # noqa: E402

app.include_router(api_router, prefix="")
app.include_router(sidebar_router, prefix="")
