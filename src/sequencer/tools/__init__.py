"""Tool handlers exposed to agent clients."""

from sequencer.tools.sequences import (
    SequenceCreateResponse,
    SequencePlanResponse,
    check_dependencies,
    create_sequences,
    format_error,
    format_validation,
    plan_sequence,
)

__all__ = [
    "SequenceCreateResponse",
    "SequencePlanResponse",
    "check_dependencies",
    "create_sequences",
    "format_error",
    "format_validation",
    "plan_sequence",
]
