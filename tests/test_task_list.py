import pytest
from todo.domain.task import Task
from todo.domain.task_list import TaskList
from todo.domain.enums import MarkResult
from todo.domain.errors import PositionOutOfRangeError


def make_task(title: str = "Test", completed: bool = False) -> Task:
    return Task(title=title, description="desc", due_date="1/1/2025", completed=completed)


@pytest.fixture
def three_tasks():
    tasks = TaskList()
    tasks.append(make_task("A"))
    tasks.append(make_task("B"))
    tasks.append(make_task("C"))
    return tasks


def test_append_keeps_insertion_order(three_tasks):
    assert [t.title for t in three_tasks] == ["A", "B", "C"]
    assert three_tasks.size() == 3


def test_get_uses_one_based_positions(three_tasks):
    assert three_tasks.get(1).title == "A"
    assert three_tasks.get(3).title == "C"


@pytest.mark.parametrize("position", [0, -1, 4, 100])
def test_get_out_of_range_raises(three_tasks, position):
    with pytest.raises(PositionOutOfRangeError) as exc:
        three_tasks.get(position)
    assert exc.value.position == position
    assert exc.value.size == 3


def test_get_on_empty_list_raises():
    with pytest.raises(PositionOutOfRangeError):
        TaskList().get(1)


def test_remove_shifts_later_tasks_down(three_tasks):
    # Act
    removed = three_tasks.remove(2)

    # Assert
    assert removed.title == "B"
    assert three_tasks.size() == 2
    assert three_tasks.get(2).title == "C"


def test_remove_out_of_range_leaves_list_untouched(three_tasks):
    with pytest.raises(PositionOutOfRangeError):
        three_tasks.remove(4)
    assert three_tasks.size() == 3


def test_replace_swaps_record_in_place(three_tasks):
    three_tasks.replace(2, make_task("B2"))
    assert [t.title for t in three_tasks] == ["A", "B2", "C"]


def test_replace_out_of_range_raises(three_tasks):
    with pytest.raises(PositionOutOfRangeError):
        three_tasks.replace(0, make_task("X"))


def test_mark_completed_sets_flag(three_tasks):
    assert three_tasks.mark_completed(1) is MarkResult.MARKED
    assert three_tasks.get(1).completed is True
    assert three_tasks.get(2).completed is False


def test_mark_completed_twice_reports_already_completed(three_tasks):
    three_tasks.mark_completed(1)
    before = list(three_tasks)

    assert three_tasks.mark_completed(1) is MarkResult.ALREADY_COMPLETED
    assert list(three_tasks) == before


@pytest.mark.parametrize("position", [0, 4])
def test_mark_completed_out_of_range_is_not_found(three_tasks, position):
    before = list(three_tasks)
    assert three_tasks.mark_completed(position) is MarkResult.NOT_FOUND
    assert list(three_tasks) == before


def test_enumerate_pairs_positions_with_tasks(three_tasks):
    assert [(p, t.title) for p, t in three_tasks.enumerate()] == [(1, "A"), (2, "B"), (3, "C")]


def test_is_valid_position(three_tasks):
    assert three_tasks.is_valid_position(1)
    assert three_tasks.is_valid_position(3)
    assert not three_tasks.is_valid_position(0)
    assert not three_tasks.is_valid_position(4)
