"""Task dependency sequencing and execution planning."""

from sequencer.tasks.dependencies import (
    DependencyValidation,
    normalize_dependency_ids,
    validate_dependencies,
)
from sequencer.tasks.filters import filter_tasks, is_completed
from sequencer.tasks.graph import TaskGraph, build_graph
from sequencer.tasks.leveler import assign_levels
from sequencer.tasks.planner import plan_execution
from sequencer.tasks.sequences import compute_sequences
from sequencer.tasks.source import load_tasks

__all__ = [
    "DependencyValidation",
    "TaskGraph",
    "assign_levels",
    "build_graph",
    "compute_sequences",
    "filter_tasks",
    "is_completed",
    "load_tasks",
    "normalize_dependency_ids",
    "plan_execution",
    "validate_dependencies",
]
