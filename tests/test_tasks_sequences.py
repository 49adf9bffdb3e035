"""Tests for full-graph sequence computation."""

import random

import pytest

from sequencer import compute_sequences
from sequencer.errors import CircularDependencyError, SequencerError


def _ids(sequences) -> list[list[str]]:
    return [seq.task_ids for seq in sequences]


class TestComputeSequences:
    """Tests for compute_sequences shapes."""

    def test_empty_input(self) -> None:
        assert compute_sequences([]) == []

    def test_independent_tasks_share_first_sequence(self, make_task) -> None:
        result = compute_sequences([make_task("task-2"), make_task("task-3"), make_task("task-1")])
        assert len(result) == 1
        assert result[0].number == 1
        assert result[0].task_ids == ["task-1", "task-2", "task-3"]

    def test_linear_chain(self, make_task) -> None:
        tasks = [make_task("A"), make_task("B", ["A"]), make_task("C", ["B"])]
        result = compute_sequences(tasks)
        assert [seq.number for seq in result] == [1, 2, 3]
        assert _ids(result) == [["A"], ["B"], ["C"]]

    def test_fan_out(self, make_task) -> None:
        tasks = [make_task("C", ["A"]), make_task("B", ["A"]), make_task("A")]
        assert _ids(compute_sequences(tasks)) == [["A"], ["B", "C"]]

    def test_diamond(self, make_task) -> None:
        tasks = [
            make_task("A"),
            make_task("B", ["A"]),
            make_task("C", ["A"]),
            make_task("D", ["B", "C"]),
        ]
        assert _ids(compute_sequences(tasks)) == [["A"], ["B", "C"], ["D"]]

    def test_complex_graph(self, make_task) -> None:
        tasks = [
            make_task("task-1"),
            make_task("task-2"),
            make_task("task-3", ["task-1"]),
            make_task("task-4", ["task-1", "task-2"]),
            make_task("task-5", ["task-3"]),
            make_task("task-6", ["task-4"]),
            make_task("task-7", ["task-5", "task-6"]),
        ]
        assert _ids(compute_sequences(tasks)) == [
            ["task-1", "task-2"],
            ["task-3", "task-4"],
            ["task-5", "task-6"],
            ["task-7"],
        ]

    def test_uneven_branches(self, make_task) -> None:
        """A task waits for its deepest dependency, not the first one seen."""
        tasks = [
            make_task("a"),
            make_task("b", ["a"]),
            make_task("c", ["b"]),
            make_task("d", ["a", "c"]),
        ]
        assert _ids(compute_sequences(tasks)) == [["a"], ["b"], ["c"], ["d"]]

    def test_missing_dependency_behaves_like_no_dependency(self, make_task) -> None:
        with_missing = compute_sequences([make_task("task-1"), make_task("task-2", ["task-999"])])
        without = compute_sequences([make_task("task-1"), make_task("task-2")])
        assert _ids(with_missing) == _ids(without) == [["task-1", "task-2"]]

    def test_ids_sorted_lexicographically(self, make_task) -> None:
        tasks = [make_task("task-10"), make_task("task-2"), make_task("task-1")]
        assert compute_sequences(tasks)[0].task_ids == ["task-1", "task-10", "task-2"]

    def test_returns_same_task_objects(self, make_task) -> None:
        task = make_task("a", title="Write docs", priority="high")
        assert compute_sequences([task])[0].tasks[0] is task


class TestSequenceInvariants:
    """Property checks over a larger graph in shuffled orders."""

    @pytest.fixture
    def layered_tasks(self, make_task):
        tasks = []
        for i in range(30):
            deps = [f"t{j:02d}" for j in range(i) if (i * 7 + j) % 5 == 0]
            deps.append("external-dep")
            tasks.append(make_task(f"t{i:02d}", deps))
        return tasks

    def test_dependencies_land_in_earlier_sequences(self, layered_tasks) -> None:
        result = compute_sequences(layered_tasks)
        level = {task.id: seq.number for seq in result for task in seq.tasks}
        for task in layered_tasks:
            for dep_id in task.dependencies:
                if dep_id in level:
                    assert level[dep_id] < level[task.id]

    def test_tasks_without_in_set_dependencies_are_level_one(self, layered_tasks) -> None:
        result = compute_sequences(layered_tasks)
        level = {task.id: seq.number for seq in result for task in seq.tasks}
        for task in layered_tasks:
            if not any(dep in level for dep in task.dependencies):
                assert level[task.id] == 1

    def test_numbers_are_gap_free_and_count_preserved(self, layered_tasks) -> None:
        result = compute_sequences(layered_tasks)
        assert [seq.number for seq in result] == list(range(1, len(result) + 1))
        assert sum(len(seq.tasks) for seq in result) == len(layered_tasks)

    def test_input_order_does_not_change_output(self, layered_tasks) -> None:
        expected = _ids(compute_sequences(layered_tasks))
        rng = random.Random(42)
        for _ in range(5):
            shuffled = list(layered_tasks)
            rng.shuffle(shuffled)
            assert _ids(compute_sequences(shuffled)) == expected


class TestCircularDependencies:
    """Tests for cycle detection."""

    def test_three_task_cycle(self, make_task) -> None:
        tasks = [make_task("A", ["C"]), make_task("B", ["A"]), make_task("C", ["B"])]
        with pytest.raises(CircularDependencyError) as exc_info:
            compute_sequences(tasks)

        err = exc_info.value
        assert "Circular dependencies detected" in str(err)
        assert set(err.task_ids) == {"A", "B", "C"}
        assert set(err.details["task_ids"]) == {"A", "B", "C"}
        for task_id in ("A", "B", "C"):
            assert task_id in err.message

    def test_self_dependency(self, make_task) -> None:
        with pytest.raises(CircularDependencyError) as exc_info:
            compute_sequences([make_task("A", ["A"]), make_task("B")])
        assert exc_info.value.task_ids == ["A"]

    def test_is_a_sequencer_error(self, make_task) -> None:
        with pytest.raises(SequencerError):
            compute_sequences([make_task("A", ["B"]), make_task("B", ["A"])])
