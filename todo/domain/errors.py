

### COMMENTS
# ============================================
# Konwencja użycia błędów domenowych w projekcie
# ============================================
# - Lista zadań (TaskList):
#     * adresuje rekordy pozycją 1..len i rzuca PositionOutOfRangeError poza zakresem
#
# - Adaptery (plik, SQL, pamięć):
#     * mapują błędy techniczne (OSError, SQLAlchemyError) na StorageError
#     * niepoprawna linia w pliku -> MalformedLineError (tryb strict) albo pominięcie
#
# - Serwisy:
#     * walidują dane użytkownika i rzucają TaskValidationError / InvalidDateError
#
# - UI (CLI):
#     * NonNumericInputError przy parsowaniu numeru zadania
#     * łapie DomainError i wyświetla przyjazny komunikat


class DomainError(Exception):
    """Bazowa klasa dla błędów domenowych.
    Umożliwia odróżnienie błędów domeny (logika aplikacji) od błędów technicznych.
    Nie powinna być rzucana bezpośrednio — używaj klas pochodnych.
    """


class TaskValidationError(DomainError):
    """Rzucany, gdy dane wejściowe nie spełniają reguł dla zadania.
    Przykłady:
    - tytuł jest pusty,
    - pole zawiera znak cudzysłowu, którego format pliku nie potrafi zapisać.
    Zawiera komunikat (`message`) oraz nazwę pola (`field`).
    """
    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(self.__str__())
    def __str__(self):
        return f"Invalid value for '{self.field}': {self.message}"


class InvalidDateError(TaskValidationError):
    """Rzucany przez walidator dat, gdy tekst nie opisuje prawdziwej daty D/M/Y."""
    def __init__(self, text: str):
        self.text = text
        super().__init__("due_date", f"'{text}' is not a valid date")


class PositionOutOfRangeError(DomainError):
    """Rzucany, gdy numer zadania (1-based) jest spoza zakresu [1, size]."""
    def __init__(self, position: int, size: int):
        self.position = position
        self.size = size
        super().__init__(self.__str__())
    def __str__(self):
        if self.size == 0:
            return f"Task number {self.position} is out of range (the list is empty)."
        return f"Task number {self.position} is out of range (1-{self.size})."


class NonNumericInputError(DomainError):
    """Rzucany przez warstwę UI, gdy numer zadania nie jest liczbą całkowitą."""
    def __init__(self, text: str):
        self.text = text
        super().__init__(self.__str__())
    def __str__(self):
        return f"'{self.text}' is not a number."


class MalformedLineError(DomainError):
    """Linia pliku nie pasuje do formatu "title","description","due_date","0|1"."""
    def __init__(self, source: str, lineno: int, line: str):
        self.source = source
        self.lineno = lineno
        self.line = line
        super().__init__(self.__str__())
    def __str__(self):
        return f"{self.source}:{self.lineno}: malformed record: {self.line!r}"


class StorageError(DomainError):
    """Błąd techniczny zapisu/odczytu zmapowany przez adapter."""
