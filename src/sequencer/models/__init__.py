"""Pydantic and dataclass models for the task sequencer."""

from sequencer.models.tasks import (
    UNSEQUENCED_REASON,
    ExecutionPlan,
    Phase,
    Sequence,
    Task,
    UnsequencedEntry,
)

__all__ = [
    "UNSEQUENCED_REASON",
    "ExecutionPlan",
    "Phase",
    "Sequence",
    "Task",
    "UnsequencedEntry",
]
