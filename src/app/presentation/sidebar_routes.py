from __future__ import annotations

from pathlib import Path

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from src.app.application.sidebar import SidebarService
from src.app.domain.models import SidebarView

router = APIRouter(tags=["sidebar"])
templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))

_sidebar_service = SidebarService()


@router.get(
    "/api/sidebar",
    response_model=SidebarView,
    summary="Sidebar view model",
    description="Profile card (signed-in users only), trending topics, suggestions and footer links.",
)
async def sidebar_data(request: Request) -> SidebarView:
    return await _sidebar_service.build(request)


@router.get("/sidebar", response_class=HTMLResponse, summary="Rendered sidebar")
async def sidebar_page(request: Request):
    view = await _sidebar_service.build(request)
    return templates.TemplateResponse(request, "sidebar.html", {"sidebar": view})
