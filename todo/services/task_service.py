from todo.ports.task_storage import TaskStorage
from todo.domain.task import Task
from todo.domain.task_list import TaskList
from todo.domain.enums import MarkResult
from todo.domain.errors import TaskValidationError
from todo.domain.dates import canonicalize_date
from dataclasses import replace
import logging

logger = logging.getLogger(__name__)


### COMMENTS
# ==========================================================
# Warstwa serwisowa (services/task_service.py) — przypadki użycia.
# ==========================================================
# Rola:
# - Właściciel listy zadań na czas sesji (wczytanie na starcie, zapis przez save()).
# - Walidacje danych wejściowych (tytuł, cudzysłowy, data) przed zmianą listy.
# - add/edit albo kończą się sukcesem, albo nie zmieniają listy wcale.
#
# Zasady:
# - Serwis korzysta wyłącznie z portu `TaskStorage`; nie zna formatu pliku.
# - Błędy domenowe:
#     * pusty tytuł / cudzysłów lub znak nowej linii w polu -> `TaskValidationError`
#     * zła data -> `InvalidDateError`
#     * zły numer zadania -> `PositionOutOfRangeError` (z TaskList)
# - autosave=False: zapis tylko przy wyjściu (wywołuje UI); autosave=True: po każdej zmianie.


def _check_field(field: str, value: str) -> None:
    if '"' in value:
        raise TaskValidationError(field, 'double quotes (") are not allowed')
    if "\n" in value or "\r" in value:
        raise TaskValidationError(field, "line breaks are not allowed")


class TaskService:
    """
    Serwis przypadków użycia dla listy zadań.

    :param storage: Implementacja portu TaskStorage.
    :param autosave: Zapis po każdej udanej zmianie.
    """
    def __init__(self, storage: TaskStorage, *, autosave: bool = False) -> None:
        self.storage = storage
        self.autosave = autosave
        self.tasks: TaskList = storage.load()

    def _changed(self) -> None:
        if self.autosave:
            self.save()

    def _build(self, title: str, description: str, due_date: str, completed: bool = False) -> Task:
        if not title or not title.strip():
            raise TaskValidationError("title", "title cannot be empty")
        description = description or ""
        _check_field("title", title)
        _check_field("description", description)
        return Task(
            title=title,
            description=description,
            due_date=canonicalize_date(due_date),
            completed=completed,
        )

    def add_task(self, title: str, description: str = "", due_date: str = "") -> Task:
        """
            Tworzy nowe zadanie i dodaje je na koniec listy.

            - `title` nie może być pusty (`TaskValidationError("title", ...)`).
            - `due_date` jest walidowana i zapisywana w formie kanonicznej D/M/Y.
            - Status startowy: completed=False.

            :raises TaskValidationError: Gdy tytuł/opis są niepoprawne.
            :raises InvalidDateError: Gdy data nie istnieje w kalendarzu.
            :return: Utworzony obiekt `Task`.
        """
        task = self._build(title, description, due_date)
        self.tasks.append(task)
        logger.info("Added task #%d %r due %s", self.tasks.size(), task.title, task.due_date)
        self._changed()
        return task

    def edit_task(self, position: int, title: str, description: str, due_date: str) -> Task:
        """
            Replaces title, description and due date of the task at `position`.

            - The position is checked first (`PositionOutOfRangeError`).
            - Validation is the same as in `add_task`; nothing changes on error.
            - The `completed` flag is preserved.

            :return: The updated `Task`.
        """
        current = self.tasks.get(position)
        task = self._build(title, description, due_date, completed=current.completed)
        self.tasks.replace(position, task)
        logger.info("Edited task #%d", position)
        self._changed()
        return task

    def mark_done(self, position: int) -> MarkResult:
        """
            Marks the task at `position` as completed.

            :return: `MarkResult.MARKED`, `MarkResult.ALREADY_COMPLETED` or `MarkResult.NOT_FOUND`.
        """
        result = self.tasks.mark_completed(position)
        logger.debug("Mark task #%d -> %s", position, result)
        if result is MarkResult.MARKED:
            self._changed()
        return result

    def remove_task(self, position: int) -> Task:
        """
            Usuwa zadanie; kolejne zadania przesuwają się o jedną pozycję w dół.

            :raises PositionOutOfRangeError: Gdy numer jest spoza zakresu.
            :return: Usunięte zadanie.
        """
        task = self.tasks.remove(position)
        logger.info("Removed task #%d %r", position, task.title)
        self._changed()
        return task

    def get_task(self, position: int) -> Task:
        return self.tasks.get(position)

    def list_tasks(self) -> list[tuple[int, Task]]:
        """Zwraca pary (numer 1-based, zadanie) w kolejności listy."""
        return self.tasks.enumerate()

    def count(self) -> int:
        return self.tasks.size()

    def save(self) -> None:
        self.storage.save(self.tasks)
