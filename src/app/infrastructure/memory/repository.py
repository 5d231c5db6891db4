from __future__ import annotations

import asyncio
import itertools
import logging
from collections.abc import Iterable

from src.app.domain.models.task import Task
from src.app.domain.repositories import TaskRepository

logger = logging.getLogger(__name__)

SEED_TITLES = ("Task 1", "Task 2", "Task 3")


class InMemoryTaskRepository(TaskRepository):
    """
    Process-local task storage.
    Identifiers come from a monotonic counter, so they stay unique even if
    tasks are ever removed or created concurrently.
    """

    def __init__(self, seed: Iterable[Task] = ()) -> None:
        self._tasks: list[Task] = [task.model_copy() for task in seed]
        start = max((task.id for task in self._tasks), default=0) + 1
        self._ids = itertools.count(start)
        self._lock = asyncio.Lock()

    @classmethod
    def with_seed_data(cls) -> InMemoryTaskRepository:
        seed = [Task(id=i, title=title) for i, title in enumerate(SEED_TITLES, start=1)]
        return cls(seed)

    async def list_tasks(self) -> list[Task]:
        return [task.model_copy() for task in self._tasks]

    async def add_task(self, title: str) -> Task:
        async with self._lock:
            task = Task(id=next(self._ids), title=title, completed=False)
            self._tasks.append(task)
        logger.debug("Stored task", extra={"task_id": task.id})
        return task.model_copy()

    def __len__(self) -> int:
        return len(self._tasks)
