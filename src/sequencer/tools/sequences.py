"""Sequencing tools: structured results plus markdown for agent clients.

Two tools:
- create_sequences: full-graph sequences after status filtering
- plan_sequence: phased execution plan for a chosen subset of tasks
"""

from collections.abc import Iterable
from dataclasses import asdict, dataclass, field
from typing import Any

import structlog

from sequencer.models.tasks import ExecutionPlan, Sequence, Task
from sequencer.tasks import (
    DependencyValidation,
    compute_sequences,
    filter_tasks,
    plan_execution,
    validate_dependencies,
)

log = structlog.get_logger()

NO_STATUS = "No Status"


def _task_line(task: Task) -> str:
    return f"- **{task.id}** - {task.title} ({task.status or NO_STATUS})"


# =============================================================================
# sequence_create
# =============================================================================


@dataclass
class SequenceMetadata:
    """Counts describing a sequence computation."""

    total_tasks: int
    filtered_tasks: int
    sequence_count: int
    max_tasks_in_sequence: int
    include_completed: bool = False
    filter_status: str | None = None


@dataclass
class SequenceCreateResponse:
    """Response from create_sequences."""

    sequences: list[Sequence]
    metadata: SequenceMetadata

    @property
    def markdown(self) -> str:
        meta = self.metadata
        lines = ["# Task Execution Sequences", "", "## Summary", ""]
        lines += ["| Metric | Value |", "|--------|-------|"]
        lines.append(f"| Total Tasks | {meta.total_tasks} |")
        lines.append(f"| Filtered Tasks | {meta.filtered_tasks} |")
        lines.append(f"| Sequences | {meta.sequence_count} |")
        lines.append(f"| Include Completed | {meta.include_completed} |")
        if meta.filter_status:
            lines.append(f"| Filter Status | {meta.filter_status} |")
        lines.append("")

        if not self.sequences:
            lines.append("No tasks found matching the criteria.")
            return "\n".join(lines)

        lines += ["## Execution Sequences", ""]
        for sequence in self.sequences:
            lines += [f"### Sequence {sequence.number}", ""]
            lines += [_task_line(task) for task in sequence.tasks]
            lines.append("")
        return "\n".join(lines)

    def to_dict(self) -> dict[str, Any]:
        return {
            "sequences": [
                {"number": seq.number, "tasks": [task.model_dump() for task in seq.tasks]}
                for seq in self.sequences
            ],
            "metadata": asdict(self.metadata),
        }


def create_sequences(
    tasks: Iterable[Task],
    *,
    include_completed: bool = False,
    filter_status: str | None = None,
) -> SequenceCreateResponse:
    """Compute execution sequences from task dependencies.

    Raises:
        CircularDependencyError: If the filtered tasks contain a cycle.
    """
    all_tasks = list(tasks)
    selected = filter_tasks(
        all_tasks, include_completed=include_completed, filter_status=filter_status
    )
    sequences = compute_sequences(selected)

    log.info(
        "sequence_create",
        total=len(all_tasks),
        filtered=len(selected),
        sequences=len(sequences),
    )

    return SequenceCreateResponse(
        sequences=sequences,
        metadata=SequenceMetadata(
            total_tasks=len(all_tasks),
            filtered_tasks=len(selected),
            sequence_count=len(sequences),
            max_tasks_in_sequence=max((len(seq.tasks) for seq in sequences), default=0),
            include_completed=include_completed,
            filter_status=filter_status,
        ),
    )


# =============================================================================
# sequence_plan
# =============================================================================


@dataclass
class PlanTask:
    """Task entry inside a plan phase."""

    id: str
    title: str
    status: str
    dependencies: list[str] = field(default_factory=list)
    assignees: list[str] = field(default_factory=list)

    @classmethod
    def from_task(cls, task: Task) -> "PlanTask":
        return cls(
            id=task.id,
            title=task.title,
            status=task.status or NO_STATUS,
            dependencies=list(task.dependencies),
            assignees=list(task.assignees),
        )


@dataclass
class PlanPhase:
    """A phase of tasks that can run in parallel."""

    phase: int
    name: str
    tasks: list[PlanTask]
    can_run_in_parallel: bool = True
    depends_on: list[int] = field(default_factory=list)


@dataclass
class PlanUnsequenced:
    """A task that can be done at any point in the plan."""

    id: str
    title: str
    status: str
    reason: str


@dataclass
class PlanSummary:
    """Plan-wide counts."""

    total_phases: int
    total_tasks_in_plan: int
    unsequenced_tasks: int
    can_start_immediately: int


@dataclass
class SequencePlanResponse:
    """Response from plan_sequence."""

    phases: list[PlanPhase]
    unsequenced: list[PlanUnsequenced]
    summary: PlanSummary
    not_found: list[str] = field(default_factory=list)

    @classmethod
    def from_plan(cls, plan: ExecutionPlan) -> "SequencePlanResponse":
        phases = [
            PlanPhase(
                phase=phase.number,
                name=f"Sequence {phase.number}",
                tasks=[PlanTask.from_task(task) for task in phase.tasks],
                depends_on=[phase.number - 1] if phase.number > 1 else [],
            )
            for phase in plan.phases
        ]
        unsequenced = [
            PlanUnsequenced(
                id=entry.task.id,
                title=entry.task.title,
                status=entry.task.status or NO_STATUS,
                reason=entry.reason,
            )
            for entry in plan.unsequenced
        ]
        return cls(
            phases=phases,
            unsequenced=unsequenced,
            summary=PlanSummary(
                total_phases=len(phases),
                total_tasks_in_plan=sum(len(phase.tasks) for phase in phases),
                unsequenced_tasks=len(unsequenced),
                can_start_immediately=len(phases[0].tasks) if phases else 0,
            ),
            not_found=list(plan.not_found),
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @property
    def markdown(self) -> str:
        summary = self.summary
        lines = ["# Execution Plan", "", "## Summary", ""]
        lines += ["| Metric | Value |", "|--------|-------|"]
        lines.append(f"| Total Phases | {summary.total_phases} |")
        lines.append(f"| Tasks in Plan | {summary.total_tasks_in_plan} |")
        lines.append(f"| Unsequenced Tasks | {summary.unsequenced_tasks} |")
        lines.append(f"| Can Start Immediately | {summary.can_start_immediately} |")
        lines.append("")

        if self.not_found:
            lines += ["## Not Found", ""]
            lines += [f"- **{task_id}**" for task_id in self.not_found]
            lines.append("")

        if self.phases:
            lines += ["## Execution Phases", ""]
            for phase in self.phases:
                lines += [f"### Phase {phase.phase}: {phase.name}", ""]
                if phase.depends_on:
                    lines += [f"**Depends on:** Phase {', Phase '.join(map(str, phase.depends_on))}", ""]
                lines.append("**Tasks:**")
                for task in phase.tasks:
                    assignees = f" ({', '.join(task.assignees)})" if task.assignees else ""
                    lines.append(f"- **{task.id}** - {task.title} ({task.status}){assignees}")
                    if task.dependencies:
                        lines.append(f"  - Dependencies: {', '.join(task.dependencies)}")
                lines.append("")

        if self.unsequenced:
            lines += ["## Unsequenced Tasks", ""]
            lines += ["These tasks have no dependencies and can be done anytime:", ""]
            for entry in self.unsequenced:
                lines.append(f"- **{entry.id}** - {entry.title} ({entry.status})")
                lines.append(f"  - {entry.reason}")
            lines.append("")

        if not self.phases and not self.unsequenced:
            lines.append("No tasks found for execution planning.")

        return "\n".join(lines)


def plan_sequence(
    tasks: Iterable[Task],
    *,
    task_ids: list[str] | None = None,
    include_completed: bool = False,
) -> SequencePlanResponse:
    """Create an execution plan with phase information.

    Requested ids are resolved against the full snapshot, so a completed task
    asked for by id is left out of the plan rather than reported as not found.

    Raises:
        CircularDependencyError: If the planned tasks contain a cycle.
    """
    all_tasks = list(tasks)
    selected = filter_tasks(all_tasks, include_completed=include_completed)
    plan = plan_execution(selected, task_ids)

    known = {task.id for task in all_tasks}
    plan.not_found = [task_id for task_id in plan.not_found if task_id not in known]

    log.info(
        "sequence_plan",
        requested=len(task_ids or []),
        phases=len(plan.phases),
        unsequenced=len(plan.unsequenced),
    )
    return SequencePlanResponse.from_plan(plan)


# =============================================================================
# dependency_validate
# =============================================================================


def format_validation(result: DependencyValidation) -> str:
    """Render a dependency validation result as markdown."""
    lines = [f"# Dependency Validation for {result.task_id}", ""]

    if result.invalid:
        lines += ["## Validation Status: FAILED", "", "### Invalid Dependencies"]
        lines += ["The following dependencies do not exist:", ""]
        lines += [f"- **{dep}**" for dep in result.invalid]
        lines.append("")
    else:
        lines += ["## Validation Status: PASSED", "", "All dependencies exist and are valid.", ""]

    if result.valid:
        lines += ["## Dependency Analysis", ""]
        lines.append(f"- **Direct dependencies:** {len(result.valid)}")
        if result.sequence_number is not None:
            lines.append(f"- **Sequence position:** {result.sequence_number}")
        if result.cycle_error:
            lines.append(f"- **Cycle:** {result.cycle_error}")
        lines += ["", "### Valid Dependencies"]
        lines += [f"- **{dep}**" for dep in result.valid]

    return "\n".join(lines)


def check_dependencies(
    tasks: Iterable[Task],
    task_id: str,
    proposed: list[str] | None = None,
) -> tuple[DependencyValidation, str]:
    """Validate a task's dependencies and render the result.

    Raises:
        TaskNotFoundError: If ``task_id`` is not in the snapshot.
    """
    result = validate_dependencies(task_id, tasks, proposed)
    return result, format_validation(result)


def format_error(prefix: str, exc: Exception) -> str:
    """Build the error envelope text returned to tool callers."""
    return f"{prefix}: {exc}"
