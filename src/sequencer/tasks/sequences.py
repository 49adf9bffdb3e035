"""Group leveled tasks into parallel execution sequences."""

from collections.abc import Iterable
from typing import TypeVar

import structlog

from sequencer.models.tasks import Sequence, Task
from sequencer.tasks.graph import TaskGraph, build_graph
from sequencer.tasks.leveler import assign_levels

log = structlog.get_logger()

S = TypeVar("S", bound=Sequence)


def assemble(graph: TaskGraph, levels: dict[int, int], kind: type[S]) -> list[S]:
    """Group tasks by level, ascending, with each group sorted by task id."""
    grouped: dict[int, list[Task]] = {}
    for position, level in levels.items():
        grouped.setdefault(level, []).append(graph.tasks[position])

    return [
        kind(number=level, tasks=sorted(grouped[level], key=lambda task: task.id))
        for level in sorted(grouped)
    ]


def compute_sequences(tasks: Iterable[Task]) -> list[Sequence]:
    """Compute sequences of tasks that can be worked on in parallel.

    Tasks in the same sequence have no dependencies on each other but may
    depend on tasks from earlier sequences. Dependencies on ids that are not
    in ``tasks`` are treated as already satisfied.

    Args:
        tasks: Snapshot of the tasks to order, already filtered by the caller.

    Returns:
        Sequences numbered from 1, or an empty list for no tasks.

    Raises:
        CircularDependencyError: If the tasks contain a dependency cycle.
    """
    graph = build_graph(tasks)
    if not len(graph):
        return []

    sequences = assemble(graph, assign_levels(graph), Sequence)

    log.debug(
        "sequences_computed",
        task_count=len(graph),
        sequence_count=len(sequences),
    )
    return sequences
