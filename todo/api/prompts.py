from todo.domain.errors import NonNumericInputError

CONFIRM_ANSWERS = {"y", "yes"}


def parse_position(text: str) -> int:
    """
        Zamienia tekst wpisany przez użytkownika na numer zadania (1-based; 0 = przerwij).

        Zakres nie jest tu sprawdzany — robi to TaskList (PositionOutOfRangeError).

        :raises NonNumericInputError: Gdy tekst nie jest liczbą całkowitą.
    """
    try:
        return int(text.strip())
    except ValueError:
        raise NonNumericInputError(text.strip())


def is_confirmed(answer: str) -> bool:
    """Tylko "y"/"yes" (bez względu na wielkość liter) potwierdza usunięcie."""
    return answer.strip().lower() in CONFIRM_ANSWERS
