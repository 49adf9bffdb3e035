"""Load task snapshots from JSON files."""

import json
from pathlib import Path

import structlog
from pydantic import TypeAdapter, ValidationError

from sequencer.errors import TaskSourceError
from sequencer.models.tasks import Task

log = structlog.get_logger()

_tasks_adapter = TypeAdapter(list[Task])


def load_tasks(path: Path | str) -> list[Task]:
    """Read a task snapshot.

    The file holds either a JSON list of tasks or an object with a ``tasks``
    list.

    Raises:
        TaskSourceError: If the file cannot be read or decoded, or has invalid tasks.
    """
    source = Path(path)
    try:
        raw = json.loads(source.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise TaskSourceError(f"Task file not found: {source}", details={"path": str(source)}) from e
    except OSError as e:
        raise TaskSourceError(
            f"Task file could not be read: {source} ({e.strerror or e})",
            details={"path": str(source)},
        ) from e
    except UnicodeDecodeError as e:
        raise TaskSourceError(
            f"Task file is not valid UTF-8: {source}",
            details={"path": str(source), "position": e.start},
        ) from e
    except json.JSONDecodeError as e:
        raise TaskSourceError(
            f"Task file is not valid JSON: {source} ({e.msg})",
            details={"path": str(source), "line": e.lineno},
        ) from e

    if isinstance(raw, dict):
        raw = raw.get("tasks", [])

    try:
        tasks = _tasks_adapter.validate_python(raw)
    except ValidationError as e:
        raise TaskSourceError(
            f"Invalid task data in {source}: {e.error_count()} error(s)",
            details={"path": str(source), "errors": e.errors(include_url=False)},
        ) from e

    log.debug("tasks_loaded", path=str(source), count=len(tasks))
    return tasks
