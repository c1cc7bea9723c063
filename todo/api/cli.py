from todo.domain.errors import (
    DomainError,
    InvalidDateError,
    NonNumericInputError,
    PositionOutOfRangeError,
    TaskValidationError,
)
from todo.domain.task import Task
from todo.domain.enums import MarkResult
from todo.domain.dates import is_valid_date
from todo.services.task_service import TaskService
from todo.ports.task_storage import TaskStorage
from todo.adapters.memory.task_storage import InMemoryTaskStorage
from todo.adapters.csv.task_storage import CsvTaskStorage
from todo.adapters.sql.task_storage import SqlTaskStorage
from todo.api.prompts import parse_position, is_confirmed
from todo.api.colors import color_completed
from todo.config import Settings, load_settings
from todo.logging_setup import setup_logging
from typer import Context, Exit, Option, Typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.panel import Panel
from pathlib import Path
from typing import Optional
import logging

logger = logging.getLogger(__name__)


### COMMENTS
# ==========================================================
# CLI (Typer + Rich) — interfejs użytkownika listy zadań.
# ==========================================================
# Rola:
# - `todo` bez komendy: menu interaktywne 1-6 (dodaj, pokaż, oznacz, edytuj, usuń, wyjdź).
# - Komendy jednorazowe (add/list/done/edit/rm/show): wczytaj -> zmień -> zapisz.
# - Łapie DomainError i drukuje przyjazne komunikaty.
#
# Zasady:
# - Zero logiki biznesowej — deleguj do TaskService.
# - Jednorazowy bootstrap zależności (storage + service) w callbacku.
# - Tekst od użytkownika zawsze przez escape(), żeby "[...]" nie było traktowane jak markup.


app = Typer(help="To-do list CLI")
console = Console()

service: TaskService | None = None  # ustawimy w callbacku

MENU = (
    "-To Do List-\n"
    "1. Add Task\n"
    "2. View Tasks\n"
    "3. Mark Task as Completed\n"
    "4. Edit Task\n"
    "5. Delete Task\n"
    "6. Exit\n"
)


def build_storage(
    settings: Settings,
    file: Optional[Path] = None,
    db_path: Optional[Path] = None,
    memory: bool = False,
    strict: bool = False,
) -> TaskStorage:
    """Wybiera adapter:
    - --memory -> InMemory (bez trwałości)
    - --db / TODO_DB_PATH -> SQLite
    - w pozostałych przypadkach plik tekstowy (--file / TODO_DATA_PATH)
    """
    if memory:
        return InMemoryTaskStorage()
    db_path = db_path or settings.db_path
    if db_path:
        return SqlTaskStorage(Path(db_path))
    return CsvTaskStorage(file or settings.data_path, strict=strict or settings.strict_load)


@app.callback(invoke_without_command=True)
def main(
    ctx: Context,
    file: Optional[Path] = Option(
        None,
        "--file",
        "-f",
        help="Ścieżka do pliku z zadaniami (domyślnie TODO_DATA_PATH lub ./save.csv)",
    ),
    db: Optional[Path] = Option(None, "--db", help="Plik bazy SQLite zamiast pliku tekstowego"),
    memory: bool = Option(False, "--memory", help="Bez trwałego zapisu"),
    strict: bool = Option(False, "--strict", help="Przerwij wczytywanie przy uszkodzonej linii"),
    autosave: bool = Option(False, "--autosave", help="Zapisuj po każdej zmianie"),
) -> None:
    """Bootstrap zależności na starcie procesu CLI."""
    global service
    settings = load_settings()
    setup_logging(log_dir=settings.log_dir, console_level=settings.log_level)

    try:
        storage = build_storage(settings, file=file, db_path=db, memory=memory, strict=strict)
        service = TaskService(storage, autosave=autosave or settings.autosave)
    except DomainError as e:
        print_error(e, title="Nie można wczytać zadań")
        raise Exit(code=1)

    if ctx.invoked_subcommand is None:
        run_menu()


def print_error(e: Exception, title: str = "Błąd domenowy", hint: str | None = None) -> None:
    body = f"❌ {escape(str(e))}"
    if hint:
        body += f"\n[dim]{hint}[/]"
    console.print(Panel.fit(body, title=title, border_style="red"))


def commit() -> None:
    """Zapis po komendzie jednorazowej (przy autosave już zapisano)."""
    if not service.autosave:
        service.save()


def render_list(items: list[tuple[int, Task]]) -> None:
    """Renderuje tabelę Rich z kolumnami: #, Title, Description, Due Date, Completed."""
    if not items:
        console.print("[dim]No tasks yet.[/]")
        return

    table = Table(title="All Tasks", show_lines=True, header_style="bold")
    table.add_column("#", no_wrap=True, style="cyan", justify="right")
    table.add_column("Title")
    table.add_column("Description")
    table.add_column("Due Date", no_wrap=True)
    table.add_column("Completed", no_wrap=True)

    for position, t in items:
        table.add_row(
            str(position),
            escape(t.title),
            escape(t.description),
            t.due_date,
            color_completed(t.completed),
        )
    console.print(table)


def render_task(position: int, task: Task) -> str:
    return "\n".join([
        f"#{position}",
        f"Title: {escape(task.title)}",
        f"Desc: {escape(task.description) or '[dim]brak[/]'}",
        f"Due Date: {task.due_date}",
        f"Completed: {color_completed(task.completed)}",
    ])


# ---- menu interaktywne ----

def ask(prompt: str) -> str:
    return console.input(prompt, markup=False)


def prompt_position(action: str) -> int | None:
    """Pyta o numer zadania aż do skutku; 0 = przerwij (zwraca None)."""
    while True:
        raw = ask(f"Enter task number to {action} (0 to abort operation): ")
        try:
            position = parse_position(raw)
        except NonNumericInputError:
            console.print("What you've entered is not a number.")
            continue
        if position == 0:
            console.print("Abort task.")
            return None
        if service.tasks.is_valid_position(position):
            return position
        console.print("Task number is out of range.")


def prompt_date(prompt: str) -> str:
    text = ask(prompt)
    while not is_valid_date(text):
        text = ask("Please enter a valid date: ")
    return text


def menu_add() -> None:
    console.print("Enter task details (Empty to abort operation): ")
    title = ask("Title: ")
    if not title.strip():
        console.print("Abort task.")
        return
    description = ask("Description: ")
    due_date = prompt_date("Due Date (DD/MM/YYYY): ")
    try:
        service.add_task(title, description, due_date)
    except TaskValidationError as e:
        print_error(e, title="Błąd walidacji")
        return
    console.print("Task added successfully")


def menu_view() -> None:
    render_list(service.list_tasks())


def menu_mark() -> None:
    position = prompt_position("mark")
    if position is None:
        return
    match service.mark_done(position):
        case MarkResult.ALREADY_COMPLETED:
            console.print("Task is already marked as completed.")
        case MarkResult.MARKED:
            console.print("Task marked as completed.")
        case MarkResult.NOT_FOUND:
            console.print("Task number is out of range.")


def menu_edit() -> None:
    position = prompt_position("edit")
    if position is None:
        return
    task = service.get_task(position)

    console.print("Enter task details (Empty to abort operation): ")
    title = ask(f"Title (was {task.title}): ")
    if not title.strip():
        console.print("Abort task.")
        return
    description = ask(f"Description: (was {task.description}): ")
    due_date = prompt_date(f"Due Date (DD/MM/YYYY, was {task.due_date}): ")
    try:
        service.edit_task(position, title, description, due_date)
    except TaskValidationError as e:
        print_error(e, title="Błąd walidacji")
        return
    console.print("Task edited successfully")


def menu_remove() -> None:
    position = prompt_position("remove")
    if position is None:
        return
    task = service.get_task(position)
    if is_confirmed(ask(f'Confirm to delete "{task.title}"? [y/n]: ')):
        service.remove_task(position)
        console.print("Task deleted successfully.")
    else:
        console.print("Delete operation cancelled.")


ACTIONS = {
    "1": menu_add,
    "2": menu_view,
    "3": menu_mark,
    "4": menu_edit,
    "5": menu_remove,
}


def read_choice() -> str:
    choice = ask("Enter a number 1-6: ").strip()[:1]
    while choice not in ACTIONS and choice != "6":
        choice = ask("Invalid input. Please enter a number within range 1-6: ").strip()[:1]
    return choice


def run_menu() -> None:
    """Pętla menu; wyjście (6 albo koniec wejścia) zapisuje listę."""
    console.clear()
    try:
        while True:
            console.print(MENU, markup=False)
            choice = read_choice()
            console.print()
            console.clear()
            if choice == "6":
                break
            try:
                ACTIONS[choice]()
            except DomainError as e:
                print_error(e)
            ask("\nPress enter to continue ...")
            console.clear()
    except EOFError:
        logger.info("Input closed, leaving the menu")

    try:
        service.save()
    except DomainError as e:
        print_error(e, title="Nie zapisano zadań")
        raise Exit(code=1)
    console.print("Thanks for using the application, have a nice day!")


# ---- komendy jednorazowe ----

@app.command("add")
def add(
    title: str,
    desc: str = Option("", "--desc", "-d"),
    due: str = Option(..., "--due", help="Termin w formacie D/M/Y, np. 5/3/2025"),
) -> None:
    """
    Dodaje nowe zadanie.

    Flow:
    - Wywołaj: service.add_task(title, desc, due) i zapisz.
    - Sukces: Panel „✅ Task added”, pokaż numer i termin.
    - Błąd daty / walidacji: czerwony Panel z podpowiedzią.
    """
    try:
        task = service.add_task(title, desc, due)
        commit()
        console.print(Panel.fit(
            f"✅ Task added successfully\n"
            f"[cyan]#:[/cyan] {service.count()}\n"
            f"[dim]Title:[/dim] {escape(task.title)}\n"
            f"[dim]Due Date:[/dim] {task.due_date}",
            title="Sukces",
            border_style="green",
        ))
    except InvalidDateError as e:
        print_error(e, title="Błąd walidacji", hint="Podpowiedź: użyj np. --due 29/2/2024")
    except TaskValidationError as e:
        print_error(e, title="Błąd walidacji", hint="Podpowiedź: todo add 'Tytuł' -d 'Opis' --due 5/3/2025")
    except DomainError as e:
        print_error(e)


@app.command("list")
def list_cmd() -> None:
    """Listuje wszystkie zadania z numerami 1-based."""
    items = service.list_tasks()
    render_list(items)
    console.print(f"[dim]Razem: {len(items)}[/]")


@app.command("done")
def done(position: str) -> None:
    """
    Oznacza zadanie jako ukończone.

    Flow:
    - service.mark_done(numer) -> MARKED / ALREADY_COMPLETED / NOT_FOUND
    - Każdy wynik ma osobny komunikat.
    """
    try:
        number = parse_position(position)
        result = service.mark_done(number)
        match result:
            case MarkResult.MARKED:
                commit()
                console.print(Panel.fit(f"✅ Task #{number} marked as completed.", title="Sukces", border_style="green"))
            case MarkResult.ALREADY_COMPLETED:
                console.print(Panel.fit(f"🟡 Task #{number} is already marked as completed.", border_style="yellow"))
            case MarkResult.NOT_FOUND:
                print_error(PositionOutOfRangeError(number, service.count()), title="Nie znaleziono",
                            hint="Użyj 'todo list', żeby znaleźć poprawny numer")
    except NonNumericInputError as e:
        print_error(e, title="Błąd walidacji")
    except DomainError as e:
        print_error(e)


@app.command("edit")
def edit(
    position: str,
    title: Optional[str] = Option(None, "--title", "-t"),
    desc: Optional[str] = Option(None, "--desc", "-d"),
    due: Optional[str] = Option(None, "--due"),
) -> None:
    """
    Edytuje zadanie; pominięte opcje zachowują obecne wartości, pusty --title przerywa edycję.
    """
    try:
        number = parse_position(position)
        current = service.get_task(number)
        if title is not None and not title.strip():
            console.print("Abort task.")
            return
        task = service.edit_task(
            number,
            current.title if title is None else title,
            current.description if desc is None else desc,
            current.due_date if due is None else due,
        )
        commit()
        console.print(Panel.fit(render_task(number, task), title="Task edited successfully", border_style="green"))
    except (NonNumericInputError, TaskValidationError) as e:
        print_error(e, title="Błąd walidacji")
    except PositionOutOfRangeError as e:
        print_error(e, title="Nie znaleziono", hint="Użyj 'todo list', żeby znaleźć poprawny numer")
    except DomainError as e:
        print_error(e)


@app.command("rm")
def rm(position: str, yes: bool = Option(False, "--yes", "-y", help="Bez pytania o potwierdzenie")) -> None:
    """
    Usuwa zadanie po potwierdzeniu (y/yes); kolejne zadania zmieniają numer o 1 w dół.
    """
    try:
        number = parse_position(position)
        task = service.get_task(number)
        if not yes and not is_confirmed(ask(f'Confirm to delete "{task.title}"? [y/n]: ')):
            console.print("Delete operation cancelled.")
            return
        service.remove_task(number)
        commit()
        console.print(Panel.fit(
            f"🟡 Task deleted successfully.\n#{number}: {escape(task.title)}",
            title="Usunięto",
            border_style="yellow",
        ))
    except NonNumericInputError as e:
        print_error(e, title="Błąd walidacji")
    except PositionOutOfRangeError as e:
        print_error(e, title="Nie znaleziono", hint="Użyj 'todo list', żeby znaleźć poprawny numer")
    except DomainError as e:
        print_error(e)


@app.command("show")
def show(position: str) -> None:
    """Pokazuje szczegóły pojedynczego zadania."""
    try:
        number = parse_position(position)
        task = service.get_task(number)
        console.print(Panel.fit(render_task(number, task), title="Szczegóły zadania", border_style="cyan"))
    except NonNumericInputError as e:
        print_error(e, title="Błąd walidacji")
    except PositionOutOfRangeError as e:
        print_error(e, title="Nie znaleziono", hint="Użyj 'todo list', żeby znaleźć poprawny numer")


if __name__ == "__main__":
    app()
