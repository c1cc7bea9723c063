from typing import Protocol
from todo.domain.task_list import TaskList


### COMMENTS
# ==========================================================
# Kontrakt magazynu listy zadań (ports/task_storage.py).
# ==========================================================
# Ten moduł definiuje interfejs (Protocol) dla warstwy trwałości listy zadań.
# - Lista jest wczytywana raz na starcie i zapisywana w całości (brak zapisu pojedynczych rekordów).
# - Jest niezależny od technologii (pamięć, plik tekstowy, baza SQL).
# - Adaptery mają obowiązek mapować błędy technologiczne na błędy domenowe (StorageError).


class TaskStorage(Protocol):
    """Interfejs zapisu i odczytu całej listy `TaskList`.

    Adaptery (implementacje) muszą:
    - zachować kolejność rekordów (pozycja = adres zadania),
    - mapować błędy technologiczne na błędy domenowe,
    - nie wykonywać walidacji biznesowych (te należą do warstwy serwisu).
    """

    def load(self) -> TaskList:
        """Wczytuje listę zadań.

        Zwraca:
            TaskList: Lista w zapisanej kolejności; pusta, gdy magazyn jeszcze nie istnieje.

        Wyjątki domenowe:
            StorageError: Błąd odczytu.
            MalformedLineError: Tylko adapter plikowy w trybie strict.
        """

    def save(self, tasks: TaskList) -> None:
        """Zapisuje całą listę, nadpisując poprzednią zawartość.

        Wyjątki domenowe:
            StorageError: Błąd zapisu.
        """
