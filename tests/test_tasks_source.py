"""Tests for loading task snapshots from JSON."""

import pytest

from sequencer.errors import TaskSourceError
from sequencer.tasks.source import load_tasks


class TestLoadTasks:
    """Tests for load_tasks."""

    def test_loads_list(self, make_task, write_tasks) -> None:
        path = write_tasks([make_task("a"), make_task("b", ["a"])])
        tasks = load_tasks(path)
        assert [task.id for task in tasks] == ["a", "b"]
        assert tasks[1].dependencies == ["a"]

    def test_loads_wrapped_object(self, make_task, write_tasks) -> None:
        path = write_tasks([make_task("a")], wrapped=True)
        assert [task.id for task in load_tasks(str(path))] == ["a"]

    def test_defaults_for_optional_fields(self, tmp_path) -> None:
        path = tmp_path / "tasks.json"
        path.write_text('[{"id": "a", "unknown": 1}]', encoding="utf-8")
        (task,) = load_tasks(path)
        assert task.dependencies == []
        assert task.status == ""
        assert task.priority is None

    def test_missing_file(self, tmp_path) -> None:
        with pytest.raises(TaskSourceError, match="not found"):
            load_tasks(tmp_path / "nope.json")

    def test_invalid_json(self, tmp_path) -> None:
        path = tmp_path / "tasks.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(TaskSourceError, match="not valid JSON"):
            load_tasks(path)

    def test_invalid_task(self, tmp_path) -> None:
        path = tmp_path / "tasks.json"
        path.write_text('[{"title": "no id"}]', encoding="utf-8")
        with pytest.raises(TaskSourceError) as exc_info:
            load_tasks(path)
        assert exc_info.value.details["errors"]

    def test_invalid_utf8(self, tmp_path) -> None:
        path = tmp_path / "tasks.json"
        path.write_bytes(b'[{"id": "a\xff"}]')
        with pytest.raises(TaskSourceError, match="not valid UTF-8") as exc_info:
            load_tasks(path)
        assert exc_info.value.details["path"] == str(path)

    def test_directory_path(self, tmp_path) -> None:
        with pytest.raises(TaskSourceError, match="could not be read") as exc_info:
            load_tasks(tmp_path)
        assert exc_info.value.details["path"] == str(tmp_path)

    def test_singular_assignee_field(self, tmp_path) -> None:
        path = tmp_path / "tasks.json"
        path.write_text(
            '[{"id": "a", "assignee": ["alice", "bob"]}, {"id": "b", "assignee": "carol"}]',
            encoding="utf-8",
        )
        first, second = load_tasks(path)
        assert first.assignees == ["alice", "bob"]
        assert second.assignees == ["carol"]
