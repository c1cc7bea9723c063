from enum import Enum

class MarkResult(str, Enum):
    ALREADY_COMPLETED = "Already completed"
    MARKED = "Marked"
    NOT_FOUND = "Not found"

    def __str__(self):
        return self.value
