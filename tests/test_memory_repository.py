import asyncio

import pytest

from src.app.domain.models.task import Task
from src.app.infrastructure.memory.repository import InMemoryTaskRepository


@pytest.mark.asyncio
async def test_seed_data_has_three_open_tasks() -> None:
    repository = InMemoryTaskRepository.with_seed_data()

    tasks = await repository.list_tasks()

    assert [(t.id, t.title, t.completed) for t in tasks] == [
        (1, "Task 1", False),
        (2, "Task 2", False),
        (3, "Task 3", False),
    ]


@pytest.mark.asyncio
async def test_add_task_appends_with_next_id() -> None:
    repository = InMemoryTaskRepository.with_seed_data()

    first = await repository.add_task("Buy milk")
    second = await repository.add_task("Walk dog")

    assert (first.id, second.id) == (4, 5)
    tasks = await repository.list_tasks()
    assert [t.id for t in tasks] == [1, 2, 3, 4, 5]
    assert tasks[-1].title == "Walk dog"


@pytest.mark.asyncio
async def test_ids_continue_after_highest_seed_id() -> None:
    repository = InMemoryTaskRepository([Task(id=1, title="a"), Task(id=7, title="b")])

    task = await repository.add_task("c")

    assert task.id == 8


@pytest.mark.asyncio
async def test_empty_repository_starts_at_one() -> None:
    repository = InMemoryTaskRepository()

    task = await repository.add_task("first")

    assert task.id == 1
    assert len(repository) == 1


@pytest.mark.asyncio
async def test_concurrent_adds_get_distinct_ids() -> None:
    repository = InMemoryTaskRepository.with_seed_data()

    created = await asyncio.gather(*(repository.add_task(f"t{i}") for i in range(20)))

    ids = [task.id for task in created]
    assert len(set(ids)) == 20
    assert sorted(ids) == list(range(4, 24))


@pytest.mark.asyncio
async def test_list_returns_copies() -> None:
    repository = InMemoryTaskRepository.with_seed_data()

    tasks = await repository.list_tasks()
    tasks[0].title = "changed"
    tasks.clear()

    again = await repository.list_tasks()
    assert len(again) == 3
    assert again[0].title == "Task 1"
