from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from src.app.application.services import TaskService
from src.app.domain.exceptions import TaskCreationError, TaskValidationError
from src.app.domain.models import Task

router = APIRouter(prefix="/api", tags=["tasks"])

# Instantiate services once (simple DI)
_task_service = TaskService()


class ErrorResponse(BaseModel):
    error: str = Field(..., description="Human readable error message")


@router.get(
    "/tasks",
    response_model=list[Task],
    summary="List tasks",
    description="Returns every task in insertion order.",
)
async def list_tasks() -> list[Task]:
    return await _task_service.list_tasks()


@router.post(
    "/tasks",
    response_model=Task,
    summary="Create task",
    description="Appends a new task built from a JSON body of the form `{\"title\": \"...\"}`.",
    responses={
        400: {"model": ErrorResponse, "description": "Title is missing or empty."},
        500: {"model": ErrorResponse, "description": "Body could not be parsed."},
    },
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {
                "application/json": {
                    "schema": {
                        "type": "object",
                        "properties": {"title": {"type": "string"}},
                        "required": ["title"],
                    }
                }
            },
        }
    },
)
async def create_task(request: Request):
    """
    Parses the raw body so malformed JSON maps to 500 rather than FastAPI's 422.
    """
    body = await request.body()
    try:
        return await _task_service.create_task_from_json(body)
    except TaskValidationError as exc:
        return JSONResponse(status_code=400, content={"error": exc.message})
    except TaskCreationError as exc:
        return JSONResponse(status_code=500, content={"error": exc.message})
