from enum import Enum

class TaskColor(Enum):
    RED = "[red]"
    GREEN = "[green]"
    RESET = "[/]"

    def __str__(self):
        return self.value


def color_completed(completed: bool) -> str:
    """Zwraca "Yes"/"No" w Rich-markup z kolorem."""
    if completed:
        return f"{TaskColor.GREEN}Yes{TaskColor.RESET}"
    return f"{TaskColor.RED}No{TaskColor.RESET}"
