"""Wave-based topological level assignment (Kahn's algorithm)."""

from collections.abc import Collection

import structlog

from sequencer.errors import CircularDependencyError
from sequencer.tasks.graph import TaskGraph

log = structlog.get_logger()


def assign_levels(graph: TaskGraph, members: Collection[int] | None = None) -> dict[int, int]:
    """Assign every task a 1-based dependency level.

    Each wave drains the whole current frontier before any task unblocked
    during the wave is looked at, so tasks discovered in wave N land in the
    frontier for wave N + 1.

    Args:
        graph: Graph from ``build_graph``. Not modified.
        members: Optional subset of task indices to level. Edges touching
            tasks outside the subset are ignored.

    Returns:
        Mapping of task index to level.

    Raises:
        CircularDependencyError: If some members cannot be leveled.
    """
    if members is None:
        member_set = set(range(len(graph)))
        remaining = list(graph.in_degree)
    else:
        member_set = set(members)
        remaining = [0] * len(graph)
        for position in member_set:
            for dependent in graph.dependents[position]:
                if dependent in member_set:
                    remaining[dependent] += 1

    levels: dict[int, int] = {}
    current: list[int] = []
    for position in sorted(member_set):
        if remaining[position] == 0:
            levels[position] = 1
            current.append(position)

    while current:
        upcoming: list[int] = []
        for position in current:
            for dependent in graph.dependents[position]:
                if dependent not in member_set:
                    continue
                remaining[dependent] -= 1
                if remaining[dependent] == 0:
                    levels[dependent] = 1 + max(
                        (
                            levels[dep]
                            for dep in graph.in_set_dependencies(dependent)
                            if dep in levels
                        ),
                        default=0,
                    )
                    upcoming.append(dependent)
        current = upcoming

    if len(levels) < len(member_set):
        unresolved = [
            graph.tasks[position].id
            for position in sorted(member_set)
            if position not in levels
        ]
        log.warning("circular_dependencies_detected", task_ids=unresolved)
        raise CircularDependencyError(unresolved)

    return levels
