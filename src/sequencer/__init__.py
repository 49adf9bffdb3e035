"""Task dependency sequencing and execution planning.

Orders a snapshot of tasks into dependency-respecting groups that can be
worked on in parallel, and plans execution over a chosen subset of tasks.
"""

from sequencer.errors import CircularDependencyError, SequencerError
from sequencer.models.tasks import ExecutionPlan, Phase, Sequence, Task, UnsequencedEntry
from sequencer.tasks import compute_sequences, plan_execution

__version__ = "0.1.0"
__all__ = [
    "CircularDependencyError",
    "ExecutionPlan",
    "Phase",
    "Sequence",
    "SequencerError",
    "Task",
    "UnsequencedEntry",
    "__version__",
    "compute_sequences",
    "plan_execution",
]
