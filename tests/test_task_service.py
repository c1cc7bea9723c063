from todo.adapters.memory.task_storage import InMemoryTaskStorage
from todo.adapters.csv.task_storage import CsvTaskStorage
from todo.services.task_service import TaskService
from todo.domain.task import Task
from todo.domain.enums import MarkResult
from todo.domain.errors import InvalidDateError, PositionOutOfRangeError, TaskValidationError
import pytest


def format_task(position, task) -> str:
    return f"{position} | {task.title} | {task.description} | {task.due_date} | done={task.completed}"


def test_add_task_stores_canonical_date():
    # Arrange
    service = TaskService(InMemoryTaskStorage())

    # Act
    task = service.add_task("Buy milk", "2%", " 5 / 3 /2025 ")

    # Assert
    items = service.list_tasks()
    assert len(items) == 1
    assert task.due_date == "5/3/2025"
    assert task.completed is False
    assert "Buy milk" in format_task(*items[0])


@pytest.mark.parametrize("title", ["", "   "])
def test_add_rejects_empty_title(title):
    service = TaskService(InMemoryTaskStorage())

    with pytest.raises(TaskValidationError) as exc:
        service.add_task(title, "desc", "1/1/2025")
    assert exc.value.field == "title"
    assert service.count() == 0


def test_add_rejects_invalid_date_without_mutation():
    service = TaskService(InMemoryTaskStorage())

    with pytest.raises(InvalidDateError):
        service.add_task("A", "", "29/2/2023")
    assert service.count() == 0


def test_add_rejects_double_quotes():
    service = TaskService(InMemoryTaskStorage())

    with pytest.raises(TaskValidationError) as exc:
        service.add_task("A", 'say "hi"', "1/1/2025")
    assert exc.value.field == "description"
    assert service.count() == 0


def test_service_starts_with_stored_tasks():
    storage = InMemoryTaskStorage([Task(title="Old", due_date="1/1/2020")])
    service = TaskService(storage)

    assert service.get_task(1).title == "Old"


def test_edit_replaces_fields_and_keeps_completed():
    service = TaskService(InMemoryTaskStorage())
    service.add_task("A", "a", "1/1/2025")
    service.mark_done(1)

    task = service.edit_task(1, "A2", "", "02/02/2026")

    assert task == Task(title="A2", description="", due_date="2/2/2026", completed=True)
    assert service.get_task(1) == task


def test_edit_with_empty_title_leaves_task_untouched():
    service = TaskService(InMemoryTaskStorage())
    original = service.add_task("A", "a", "1/1/2025")

    with pytest.raises(TaskValidationError):
        service.edit_task(1, "", "b", "2/2/2025")
    assert service.get_task(1) == original


def test_edit_with_invalid_date_leaves_task_untouched():
    service = TaskService(InMemoryTaskStorage())
    original = service.add_task("A", "a", "1/1/2025")

    with pytest.raises(InvalidDateError):
        service.edit_task(1, "B", "b", "31/4/2025")
    assert service.get_task(1) == original


def test_edit_out_of_range_raises():
    service = TaskService(InMemoryTaskStorage())
    with pytest.raises(PositionOutOfRangeError):
        service.edit_task(1, "A", "", "1/1/2025")


def test_mark_done_three_way_result():
    service = TaskService(InMemoryTaskStorage())
    service.add_task("A", "", "1/1/2025")

    assert service.mark_done(1) is MarkResult.MARKED
    assert service.mark_done(1) is MarkResult.ALREADY_COMPLETED
    assert service.mark_done(0) is MarkResult.NOT_FOUND
    assert service.mark_done(2) is MarkResult.NOT_FOUND


def test_remove_second_of_three_shifts_third():
    service = TaskService(InMemoryTaskStorage())
    for title in ("A", "B", "C"):
        service.add_task(title, "", "1/1/2025")

    removed = service.remove_task(2)

    assert removed.title == "B"
    assert service.count() == 2
    assert service.get_task(2).title == "C"


def test_remove_out_of_range_raises():
    service = TaskService(InMemoryTaskStorage())
    with pytest.raises(PositionOutOfRangeError):
        service.remove_task(1)


def test_without_autosave_nothing_is_written_until_save():
    storage = InMemoryTaskStorage()
    service = TaskService(storage)

    service.add_task("A", "", "1/1/2025")
    assert storage.saved == ()

    service.save()
    assert [t.title for t in storage.saved] == ["A"]


def test_autosave_writes_after_each_change():
    storage = InMemoryTaskStorage()
    service = TaskService(storage, autosave=True)

    service.add_task("A", "", "1/1/2025")
    service.mark_done(1)
    service.mark_done(1)  # already completed, no write

    assert storage.save_count == 2
    assert storage.saved[0].completed is True


def test_failed_add_does_not_autosave():
    storage = InMemoryTaskStorage()
    service = TaskService(storage, autosave=True)

    with pytest.raises(InvalidDateError):
        service.add_task("A", "", "nope")
    assert storage.save_count == 0


def test_save_and_reload_from_file(tmp_path):
    # Arrange
    path = tmp_path / "save.csv"
    service = TaskService(CsvTaskStorage(path))
    service.add_task("Buy milk", "2%", " 5 / 3 /2025 ")

    # Act
    service.save()
    reloaded = TaskService(CsvTaskStorage(path))

    # Assert
    items = reloaded.list_tasks()
    assert len(items) == 1
    position, task = items[0]
    assert position == 1
    assert task.due_date == "5/3/2025"
    assert task.completed is False


@pytest.mark.parametrize("title, description, field", [
    ("Buy\nmilk", "", "title"),
    ("Buy\rmilk", "", "title"),
    ("Buy milk", "2%\n", "description"),
    ("Buy milk", "a\r\nb", "description"),
])
def test_add_rejects_line_breaks(title, description, field):
    service = TaskService(InMemoryTaskStorage())

    with pytest.raises(TaskValidationError) as exc:
        service.add_task(title, description, "5/3/2025")
    assert exc.value.field == field
    assert service.count() == 0


def test_edit_rejects_line_breaks_without_mutation():
    service = TaskService(InMemoryTaskStorage())
    original = service.add_task("A", "a", "1/1/2025")

    with pytest.raises(TaskValidationError):
        service.edit_task(1, "A", "line\nbreak", "1/1/2025")
    assert service.get_task(1) == original


def test_every_accepted_task_survives_file_round_trip(tmp_path):
    # Arrange
    path = tmp_path / "save.csv"
    service = TaskService(CsvTaskStorage(path))
    service.add_task("Buy milk, bread", "2%, [organic]", "5/3/2025")
    with pytest.raises(TaskValidationError):
        service.add_task("Buy\nmilk", "", "5/3/2025")

    # Act
    service.save()

    # Assert
    assert CsvTaskStorage(path).load() == service.tasks
