from todo.domain.task import Task
from todo.domain.task_list import TaskList
from typing import Iterable

### COMMENTS
# ==========================================================
# Adapter pamięciowy magazynu listy (adapters/memory/task_storage.py).
# ==========================================================
# - Służy do testów i trybu --memory (bez trwałego zapisu).
# - Przechowuje kopię listy (krotkę zadań), więc późniejsze zmiany w TaskList
#   nie "przeciekają" do magazynu bez jawnego save().


class InMemoryTaskStorage:
    """
        Inicjalizuje magazyn z opcjonalną kolekcją startowych zadań.
        :param initial: Iterable z obiektami Task do wstępnego załadowania (kolejność zachowana).
    """
    def __init__(self, initial: Iterable[Task] | None = None) -> None:
        self._data: tuple[Task, ...] = tuple(initial or [])
        self.save_count = 0

    def load(self) -> TaskList:
        return TaskList(self._data)

    def save(self, tasks: TaskList) -> None:
        self._data = tuple(tasks)
        self.save_count += 1

    @property
    def saved(self) -> tuple[Task, ...]:
        return self._data
