from dataclasses import dataclass


@dataclass(frozen=True)
class Task():
    """
    Model domenowy pojedynczego zadania; niemutowalny; due_date zawsze w formie
    kanonicznej D/M/Y (bez zer wiodących) dostarczanej przez serwis
    """
    title: str
    due_date: str
    description: str = ""
    completed: bool = False



### COMMENTS
# Zadanie nie ma identyfikatora — adresem rekordu jest jego pozycja na liście (TaskList).
# Zmiana pola = nowa instancja (dataclasses.replace) podstawiona w tym samym miejscu listy.
