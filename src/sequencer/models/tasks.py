"""Task snapshot and sequencing result models."""

from dataclasses import dataclass, field

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

UNSEQUENCED_REASON = "No dependencies or dependents - can be done anytime"


class Task(BaseModel):
    """A unit of work supplied by the caller.

    Tasks are read-only snapshots: the sequencer never mutates them.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str = Field(..., min_length=1, description="Unique, stable task identifier")
    title: str = Field(default="", description="Display title")
    status: str = Field(default="", description="Opaque workflow status")
    dependencies: list[str] = Field(
        default_factory=list, description="IDs of tasks that must come first"
    )
    priority: str | None = Field(default=None, description="Display priority")
    assignees: list[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("assignees", "assignee"),
        description="Assigned people",
    )

    @field_validator("assignees", mode="before")
    @classmethod
    def _wrap_single_assignee(cls, value: object) -> object:
        if isinstance(value, str):
            return [value] if value else []
        return value


@dataclass
class Sequence:
    """Tasks at the same dependency level, sorted by id."""

    number: int  # 1-based level
    tasks: list[Task] = field(default_factory=list)

    @property
    def task_ids(self) -> list[str]:
        return [task.id for task in self.tasks]


@dataclass
class Phase(Sequence):
    """A Sequence computed over a caller-selected subset of tasks."""


@dataclass
class UnsequencedEntry:
    """A planned task with no dependencies or dependents in the subset."""

    task: Task
    reason: str = UNSEQUENCED_REASON


@dataclass
class ExecutionPlan:
    """Result of subset-aware planning."""

    phases: list[Phase] = field(default_factory=list)
    unsequenced: list[UnsequencedEntry] = field(default_factory=list)
    not_found: list[str] = field(default_factory=list)  # Requested IDs with no task

    @property
    def task_count(self) -> int:
        """Number of tasks placed in phases or marked unsequenced."""
        return sum(len(phase.tasks) for phase in self.phases) + len(self.unsequenced)
