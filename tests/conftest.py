"""Shared fixtures for sequencer tests."""

import json
from collections.abc import Callable
from pathlib import Path

import pytest

from sequencer.logging import configure_logging
from sequencer.models.tasks import Task

TaskFactory = Callable[..., Task]


def build_task(task_id: str, dependencies: list[str] | None = None, **fields: object) -> Task:
    """Create a test task with sensible defaults."""
    return Task(
        id=task_id,
        title=fields.pop("title", f"Task {task_id}"),
        status=fields.pop("status", "To Do"),
        dependencies=dependencies or [],
        **fields,
    )


@pytest.fixture(autouse=True)
def _configure_logging() -> None:
    """Route structlog output to stderr so it never pollutes captured stdout."""
    configure_logging(level="WARNING", colors=False)


@pytest.fixture
def make_task() -> TaskFactory:
    """Factory for test tasks."""
    return build_task


@pytest.fixture
def write_tasks(tmp_path: Path) -> Callable[[list[Task]], Path]:
    """Write tasks to a JSON snapshot file and return its path."""

    def _write(tasks: list[Task], *, wrapped: bool = False) -> Path:
        payload: object = [task.model_dump() for task in tasks]
        if wrapped:
            payload = {"tasks": payload}
        path = tmp_path / "tasks.json"
        path.write_text(json.dumps(payload), encoding="utf-8")
        return path

    return _write
