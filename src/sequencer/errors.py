"""Custom exceptions for the task sequencer."""


class SequencerError(Exception):
    """Base exception for all sequencer errors."""

    def __init__(self, message: str, *, details: dict[str, object] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class CircularDependencyError(SequencerError):
    """Raised when the active task set contains a dependency cycle."""

    def __init__(self, task_ids: list[str]) -> None:
        super().__init__(
            f"Circular dependencies detected involving tasks: {', '.join(task_ids)}",
            details={"task_ids": list(task_ids)},
        )
        self.task_ids = list(task_ids)


class TaskNotFoundError(SequencerError):
    """Raised when a referenced task is not in the snapshot."""

    def __init__(self, task_id: str) -> None:
        super().__init__(f"Task not found: {task_id}", details={"task_id": task_id})
        self.task_id = task_id


class TaskSourceError(SequencerError):
    """Raised when a task snapshot cannot be loaded."""
