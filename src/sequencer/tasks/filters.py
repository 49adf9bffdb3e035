"""Status pre-filtering applied by callers before sequencing."""

from collections.abc import Iterable

from sequencer.models.tasks import Task

COMPLETED_STATUS = "done"
COMPLETED_MARKERS = ("complete", "closed")


def is_completed(task: Task) -> bool:
    """Check whether a task's status marks it as finished (case-insensitive)."""
    status = (task.status or "").lower()
    return status == COMPLETED_STATUS or any(marker in status for marker in COMPLETED_MARKERS)


def filter_tasks(
    tasks: Iterable[Task],
    *,
    include_completed: bool = False,
    filter_status: str | None = None,
) -> list[Task]:
    """Select the tasks a consumer wants sequenced.

    Args:
        tasks: Full task snapshot.
        include_completed: Keep finished tasks (excluded by default).
        filter_status: Keep only tasks whose status contains this text.

    Returns:
        Matching tasks in their original order.
    """
    selected = list(tasks)

    if not include_completed:
        selected = [task for task in selected if not is_completed(task)]

    if filter_status:
        wanted = filter_status.lower()
        selected = [task for task in selected if wanted in (task.status or "").lower()]

    return selected
