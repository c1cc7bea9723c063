import pytest
from todo.adapters.sql.task_storage import SqlTaskStorage
from todo.domain.task import Task
from todo.domain.task_list import TaskList


@pytest.fixture
def tmp_storage(tmp_path):
    """Magazyn na świeżej tymczasowej bazie."""
    return SqlTaskStorage(tmp_path / "tasks.db")


def make_task(title: str, completed: bool = False) -> Task:
    return Task(title=title, description="desc", due_date="1/1/2025", completed=completed)


def test_empty_database_loads_empty_list(tmp_storage):
    assert tmp_storage.load().size() == 0


def test_save_and_load_keep_order_and_fields(tmp_storage):
    tasks = TaskList([make_task("B"), make_task("A", completed=True), make_task("C")])

    tmp_storage.save(tasks)
    loaded = tmp_storage.load()

    assert loaded == tasks
    assert loaded.get(2).completed is True


def test_save_replaces_all_rows(tmp_storage):
    tmp_storage.save(TaskList([make_task("A"), make_task("B")]))
    tmp_storage.save(TaskList([make_task("C")]))

    loaded = tmp_storage.load()
    assert [t.title for t in loaded] == ["C"]


def test_save_empty_list_clears_table(tmp_storage):
    tmp_storage.save(TaskList([make_task("A")]))
    tmp_storage.save(TaskList())
    assert tmp_storage.load().size() == 0


def test_accepts_sqlalchemy_url(tmp_path):
    storage = SqlTaskStorage(f"sqlite:///{tmp_path / 'url.db'}")
    storage.save(TaskList([make_task("A")]))
    assert storage.load().get(1).title == "A"
