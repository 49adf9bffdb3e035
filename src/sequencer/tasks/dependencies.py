"""Dependency list normalization and validation."""

from collections.abc import Iterable
from dataclasses import dataclass, field

import structlog

from sequencer.errors import CircularDependencyError, TaskNotFoundError
from sequencer.models.tasks import Task
from sequencer.tasks.sequences import compute_sequences

log = structlog.get_logger()

TASK_ID_PREFIX = "task-"


@dataclass
class DependencyValidation:
    """Result of checking a task's dependencies against the snapshot."""

    task_id: str
    valid: list[str] = field(default_factory=list)  # Dependencies that exist
    invalid: list[str] = field(default_factory=list)  # Dependencies with no task
    sequence_number: int | None = None  # Task position in the full-graph sequences
    cycle_error: str | None = None

    @property
    def passed(self) -> bool:
        return not self.invalid


def normalize_dependency_ids(raw: Iterable[str]) -> list[str]:
    """Normalize user-entered dependency ids.

    Splits comma-separated entries, strips whitespace and prefixes bare ids
    with ``task-``. Duplicates are removed, keeping the first occurrence.

    Example:
        >>> normalize_dependency_ids(["1, 2", "task-3", ""])
        ['task-1', 'task-2', 'task-3']
    """
    normalized: list[str] = []
    for entry in raw:
        for part in str(entry).split(","):
            dep_id = part.strip()
            if not dep_id:
                continue
            if not dep_id.startswith(TASK_ID_PREFIX):
                dep_id = f"{TASK_ID_PREFIX}{dep_id}"
            normalized.append(dep_id)
    return list(dict.fromkeys(normalized))


def validate_dependencies(
    task_id: str,
    tasks: Iterable[Task],
    proposed: Iterable[str] | None = None,
) -> DependencyValidation:
    """Check that a task's dependencies refer to known tasks.

    Args:
        task_id: Task whose dependencies are checked.
        tasks: Full task snapshot.
        proposed: Candidate dependency ids to check instead of the task's own.

    Returns:
        DependencyValidation with valid/invalid ids and the task's sequence.

    Raises:
        TaskNotFoundError: If ``task_id`` is not in the snapshot.
    """
    snapshot = list(tasks)
    by_id = {task.id: task for task in snapshot}
    task = by_id.get(task_id)
    if task is None:
        raise TaskNotFoundError(task_id)

    to_check = normalize_dependency_ids(proposed) if proposed is not None else task.dependencies

    result = DependencyValidation(task_id=task_id)
    for dep_id in to_check:
        if dep_id in by_id:
            result.valid.append(dep_id)
        else:
            result.invalid.append(dep_id)

    if result.valid:
        try:
            sequences = compute_sequences(snapshot)
        except CircularDependencyError as e:
            result.cycle_error = e.message
        else:
            result.sequence_number = next(
                (seq.number for seq in sequences if task_id in seq.task_ids),
                None,
            )

    log.debug(
        "dependencies_validated",
        task_id=task_id,
        valid=len(result.valid),
        invalid=len(result.invalid),
    )
    return result
