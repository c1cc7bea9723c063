from todo.domain.task import Task


### COMMENTS
# ==========================================================
# Kodek formatu pliku (adapters/csv/codec.py).
# ==========================================================
# Jedna linia = jedno zadanie, cztery pola w cudzysłowach rozdzielone przecinkiem:
#   "<title>","<description>","<due_date>","<0|1>"
#
# - Brak escapowania: pole z cudzysłowem psuje format (serwis takich wartości nie przyjmuje).
# - Przecinki w polach są bezpieczne, bo granicą pól jest sekwencja "," (cudzysłów-przecinek-cudzysłów).
# - Tokenizer zwraca None dla linii, która nie pasuje; decyzję (pominąć / przerwać)
#   podejmuje adapter pliku.

QUOTE = '"'
SEPARATOR = '","'
FIELD_COUNT = 4


def encode_line(task: Task) -> str:
    """Zwraca linię (bez znaku nowej linii) dla pojedynczego zadania."""
    fields = (task.title, task.description, task.due_date, "1" if task.completed else "0")
    return QUOTE + SEPARATOR.join(fields) + QUOTE


def tokenize_line(line: str) -> list[str] | None:
    """
        Dzieli linię na cztery pola.

        - Linia musi zaczynać się i kończyć cudzysłowem (końcowe "\\r"/"\\n" są ignorowane).
        - Pola nie mogą zawierać cudzysłowu.

        :return: Lista czterech pól albo None, gdy linia nie pasuje do formatu.
    """
    line = line.rstrip("\r\n")
    if len(line) < 2 or not line.startswith(QUOTE) or not line.endswith(QUOTE):
        return None

    fields = line[1:-1].split(SEPARATOR)
    if len(fields) != FIELD_COUNT:
        return None
    if any(QUOTE in field for field in fields):
        return None
    return fields


def decode_line(line: str) -> Task | None:
    """Zwraca Task dla poprawnej linii albo None. Pole 4 == "1" oznacza ukończone."""
    fields = tokenize_line(line)
    if fields is None:
        return None
    title, description, due_date, completed = fields
    return Task(
        title=title,
        description=description,
        due_date=due_date,
        completed=completed == "1",
    )

