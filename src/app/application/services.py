import json
import logging
from typing import cast

import inject
from pydantic import ValidationError

from src.app.domain.exceptions import TaskCreationError, TaskValidationError
from src.app.domain.models import CreateTaskRequest, Task
from src.app.domain.repositories import TaskRepository

logger = logging.getLogger(__name__)


class TaskService:
    """Lists and creates tasks in the bound task repository."""

    def __init__(self, repository: TaskRepository | None = None) -> None:
        if repository is None:
            repository = cast(TaskRepository, inject.instance(TaskRepository))
        self._repository = repository

    async def list_tasks(self) -> list[Task]:
        """Return all tasks in insertion order."""
        return await self._repository.list_tasks()

    async def create_task(self, title: str | None) -> Task:
        """
        Store a new, not yet completed task.
        Raises ``TaskValidationError`` when ``title`` is missing or empty.
        """
        if not title:
            raise TaskValidationError()
        task = await self._repository.add_task(title)
        logger.info("Task created", extra={"task_id": task.id})
        return task

    async def create_task_from_json(self, body: bytes) -> Task:
        """
        Parse a raw JSON request body and create the task it describes.

        Raises ``TaskCreationError`` when the body is not JSON or is ``null``.
        Any other body without a non-empty string ``title`` raises ``TaskValidationError``.
        """
        try:
            data = json.loads(body)
        except ValueError as exc:
            logger.warning("Rejected unparseable task body", extra={"reason": str(exc)})
            raise TaskCreationError() from exc
        if data is None:
            logger.warning("Rejected null task body")
            raise TaskCreationError()

        if not isinstance(data, dict) or not data.get("title"):
            raise TaskValidationError()
        try:
            request = CreateTaskRequest.model_validate(data)
        except ValidationError as exc:
            logger.warning(
                "Rejected task body with non-string title",
                extra={"errors": exc.error_count()},
            )
            raise TaskValidationError() from exc
        return await self.create_task(request.title)
