import re

from todo.domain.errors import InvalidDateError


### COMMENTS
# ==========================================================
# Walidator dat (domain/dates.py).
# ==========================================================
# - Format wejściowy: "<int> / <int> / <int>" (dzień/miesiąc/rok), spacje wokół "/" dozwolone.
# - Muszą zostać znalezione dokładnie trzy liczby; znaki po trzeciej liczbie są ignorowane
#   (np. "5/3/2025 rano" jest poprawne).
# - Kolejność reguł: rok >= 1, miesiąc 1..12, dzień >= 1, dzień <= liczba dni w miesiącu.
# - Jedyna forma zapisywana w zadaniu to forma kanoniczna "D/M/Y" bez zer wiodących.
# - Akceptowane są wyłącznie cyfry ASCII (re.ASCII); cyfry z innych alfabetów dają niepoprawną datę.

_DATE_PATTERN = re.compile(r"\s*([+-]?\d+)\s*/\s*([+-]?\d+)\s*/\s*([+-]?\d+)", re.ASCII)

DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(year: int) -> bool:
    """Rok przestępny wg kalendarza gregoriańskiego (1900 nie, 2000 tak)."""
    if year % 400 == 0:
        return True
    if year % 100 != 0 and year % 4 == 0:
        return True
    return False


def days_in_month(month: int, year: int) -> int:
    """Liczba dni w miesiącu `month` (1..12) roku `year`."""
    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month - 1]


def _extract(text: str) -> tuple[int, int, int] | None:
    match = _DATE_PATTERN.match(text)
    if match is None:
        return None
    day, month, year = (int(group) for group in match.groups())
    return day, month, year


def parse_date(text: str) -> tuple[int, int, int]:
    """
        Wyciąga (dzień, miesiąc, rok) z tekstu i sprawdza reguły kalendarza.

        :param text: Tekst w formacie D/M/Y, np. " 5 / 3 /2025 ".
        :raises InvalidDateError: Gdy nie ma trzech liczb lub data nie istnieje.
        :return: Krotka (day, month, year).
    """
    parts = _extract(text)
    if parts is None:
        raise InvalidDateError(text)
    day, month, year = parts

    if year < 1:
        raise InvalidDateError(text)
    if month < 1 or month > 12:
        raise InvalidDateError(text)
    if day < 1:
        raise InvalidDateError(text)
    if day > days_in_month(month, year):
        raise InvalidDateError(text)

    return day, month, year


def is_valid_date(text: str) -> bool:
    try:
        parse_date(text)
    except InvalidDateError:
        return False
    return True


def canonicalize_date(text: str) -> str:
    """
        Zwraca datę w formie kanonicznej "D/M/Y" (bez zer wiodących i spacji).

        :raises InvalidDateError: Gdy `text` nie jest poprawną datą.
    """
    day, month, year = parse_date(text)
    return f"{day}/{month}/{year}"
