from typing import Iterable, Iterator

from todo.domain.task import Task
from todo.domain.enums import MarkResult
from todo.domain.errors import PositionOutOfRangeError
from dataclasses import replace


### COMMENTS
# ==========================================================
# Lista zadań (domain/task_list.py) — uporządkowany magazyn rekordów w pamięci.
# ==========================================================
# - Kolejność = kolejność dodawania; usunięcie przesuwa kolejne rekordy o jedno miejsce w dół.
# - Adresem rekordu jest jego pozycja: zewnętrzna (1-based, widoczna dla użytkownika)
#   i wewnętrzna (0-based) związane zależnością internal = external - 1.
# - Pozycja jest poprawna wtedy i tylko wtedy, gdy 1 <= external <= len(lista).
# - Lista nie waliduje pól (tytuł, data) — robi to serwis przed zapisem.
# - Jeden właściciel, jeden wątek: brak blokad.


class TaskList:
    """
        Uporządkowana kolekcja obiektów `Task` adresowana pozycją 1-based.

        :param initial: Opcjonalne zadania startowe (np. wczytane z pliku), w kolejności.
    """
    def __init__(self, initial: Iterable[Task] | None = None) -> None:
        self._items: list[Task] = list(initial or [])

    def _index(self, position: int) -> int:
        # external -> internal
        if not 1 <= position <= len(self._items):
            raise PositionOutOfRangeError(position, len(self._items))
        return position - 1

    def is_valid_position(self, position: int) -> bool:
        return 1 <= position <= len(self._items)

    def append(self, task: Task) -> None:
        """Dodaje zadanie na koniec listy, bez walidacji pól."""
        self._items.append(task)

    def get(self, position: int) -> Task:
        """
            Zwraca zadanie z pozycji `position` (1-based).

            :raises PositionOutOfRangeError: Gdy pozycja jest spoza [1, size].
        """
        return self._items[self._index(position)]

    def replace(self, position: int, task: Task) -> None:
        """
            Podmienia rekord na pozycji `position` w całości.

            :raises PositionOutOfRangeError: Gdy pozycja jest spoza [1, size].
        """
        self._items[self._index(position)] = task

    def remove(self, position: int) -> Task:
        """
            Usuwa rekord i przesuwa kolejne o jedną pozycję w dół. Operacja nieodwracalna.

            :raises PositionOutOfRangeError: Gdy pozycja jest spoza [1, size].
            :return: Usunięte zadanie.
        """
        return self._items.pop(self._index(position))

    def mark_completed(self, position: int) -> MarkResult:
        """
            Marks the task at `position` as completed.

            - Position outside [1, size] -> `MarkResult.NOT_FOUND` (no exception).
            - Already completed -> `MarkResult.ALREADY_COMPLETED`, state unchanged.
            - Otherwise the record is replaced with `completed=True` -> `MarkResult.MARKED`.
        """
        if not self.is_valid_position(position):
            return MarkResult.NOT_FOUND
        task = self.get(position)
        if task.completed:
            return MarkResult.ALREADY_COMPLETED
        self.replace(position, replace(task, completed=True))
        return MarkResult.MARKED

    def size(self) -> int:
        return len(self._items)

    def enumerate(self) -> list[tuple[int, Task]]:
        """Zwraca pary (pozycja 1-based, zadanie) w kolejności listy."""
        return list(enumerate(self._items, start=1))

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TaskList):
            return NotImplemented
        return self._items == other._items

    def __repr__(self) -> str:
        return f"TaskList({self._items!r})"
