"""Execution planning over a caller-selected subset of tasks."""

from collections.abc import Iterable

import structlog

from sequencer.models.tasks import ExecutionPlan, Phase, Task, UnsequencedEntry
from sequencer.tasks.graph import build_graph
from sequencer.tasks.leveler import assign_levels
from sequencer.tasks.sequences import assemble

log = structlog.get_logger()


def plan_execution(
    tasks: Iterable[Task],
    requested_ids: Iterable[str] | None = None,
) -> ExecutionPlan:
    """Plan execution phases for a subset of tasks.

    Only dependencies between two requested tasks count. A requested task with
    neither dependencies nor dependents inside the subset is pulled out as
    unsequenced instead of being placed in phase 1.

    Args:
        tasks: Full task snapshot.
        requested_ids: IDs to plan. None or empty plans every task.

    Returns:
        ExecutionPlan with phases, unsequenced tasks and unknown requested ids.

    Raises:
        CircularDependencyError: If the phased tasks contain a cycle.
    """
    all_tasks = list(tasks)
    requested = list(dict.fromkeys(requested_ids or []))

    active_ids: set[str] | None = None
    not_found: list[str] = []
    if requested:
        active_ids = set(requested)
        known = {task.id for task in all_tasks}
        not_found = [task_id for task_id in requested if task_id not in known]
        if not_found:
            log.info("requested_tasks_not_found", task_ids=not_found)

    graph = build_graph(all_tasks, active_ids)

    isolated = [position for position in range(len(graph)) if graph.is_isolated(position)]
    phased = [position for position in range(len(graph)) if not graph.is_isolated(position)]

    phases: list[Phase] = []
    if phased:
        phases = assemble(graph, assign_levels(graph, phased), Phase)

    unsequenced = [
        UnsequencedEntry(task=task)
        for task in sorted((graph.tasks[p] for p in isolated), key=lambda task: task.id)
    ]

    log.debug(
        "execution_planned",
        task_count=len(graph),
        phase_count=len(phases),
        unsequenced_count=len(unsequenced),
        not_found_count=len(not_found),
    )

    return ExecutionPlan(phases=phases, unsequenced=unsequenced, not_found=not_found)
