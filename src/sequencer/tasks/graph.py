"""Index-based dependency graph over a task snapshot."""

from collections.abc import Collection, Iterable
from dataclasses import dataclass, field

import structlog

from sequencer.models.tasks import Task

log = structlog.get_logger()


@dataclass
class TaskGraph:
    """Arena of tasks addressed by integer index.

    Edges run from a dependency to its dependent, so ``dependents[i]`` lists
    the tasks that become unblocked when task ``i`` is done.
    """

    tasks: list[Task]
    index: dict[str, int]  # task id -> position in tasks
    dependents: list[list[int]] = field(default_factory=list)
    in_degree: list[int] = field(default_factory=list)  # Incoming in-set edges
    dependent_count: list[int] = field(default_factory=list)  # Outgoing in-set edges

    def __len__(self) -> int:
        return len(self.tasks)

    def in_set_dependencies(self, position: int) -> list[int]:
        """Indices of the in-set tasks that ``position`` depends on."""
        task = self.tasks[position]
        return [self.index[dep_id] for dep_id in task.dependencies if dep_id in self.index]

    def is_isolated(self, position: int) -> bool:
        """True when the task has neither dependencies nor dependents in the set."""
        return self.in_degree[position] == 0 and self.dependent_count[position] == 0


def build_graph(tasks: Iterable[Task], active_ids: Collection[str] | None = None) -> TaskGraph:
    """Build the adjacency and in-degree arrays for a task snapshot.

    Args:
        tasks: Tasks in any order.
        active_ids: Restrict the graph to these ids. Tasks outside the set are
            left out, and edges are only recorded when both ends are members.

    Returns:
        TaskGraph indexed in input order.
    """
    members: list[Task] = []
    index: dict[str, int] = {}

    for task in tasks:
        if active_ids is not None and task.id not in active_ids:
            continue
        if task.id in index:
            log.warning("duplicate_task_id_ignored", task_id=task.id)
            continue
        index[task.id] = len(members)
        members.append(task)

    size = len(members)
    dependents: list[list[int]] = [[] for _ in range(size)]
    in_degree = [0] * size
    dependent_count = [0] * size

    for position, task in enumerate(members):
        for dep_id in task.dependencies:
            dep_position = index.get(dep_id)
            if dep_position is None:
                # Outside the active set: treated as already satisfied
                continue
            dependents[dep_position].append(position)
            in_degree[position] += 1
            dependent_count[dep_position] += 1

    log.debug(
        "task_graph_built",
        task_count=size,
        edge_count=sum(in_degree),
        scoped=active_ids is not None,
    )

    return TaskGraph(
        tasks=members,
        index=index,
        dependents=dependents,
        in_degree=in_degree,
        dependent_count=dependent_count,
    )
