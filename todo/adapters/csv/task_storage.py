from todo.ports.task_storage import TaskStorage
from todo.domain.task_list import TaskList
from todo.domain.errors import MalformedLineError, StorageError
from todo.adapters.csv.codec import decode_line, encode_line
from pathlib import Path
import logging
import os

logger = logging.getLogger(__name__)

DEFAULT_PATH = Path("save.csv")


class CsvTaskStorage(TaskStorage):
    def __init__(self, path: Path = DEFAULT_PATH, *, strict: bool = False) -> None:
        """Inicjalizuje magazyn plikowy.
        strict=False: niepoprawne linie są pomijane (WARNING w logu).
        strict=True: pierwsza niepoprawna linia przerywa wczytywanie (MalformedLineError)."""
        self.path = Path(path)
        self.strict = strict


    def load(self) -> TaskList:
        """Wczytuje listę z pliku. Brak pliku -> pusta lista (to nie jest błąd).
        Plik czytany binarnie: linie dzielone tylko po znaku LF, każda dekodowana osobno,
        więc bajty spoza UTF-8 trafiają do tej samej polityki co uszkodzona linia."""
        tasks = TaskList()
        skipped = 0
        try:
            with self.path.open("rb") as f:
                for lineno, raw in enumerate(f, start=1):
                    try:
                        line = raw.decode("utf-8")
                    except UnicodeDecodeError:
                        task = None
                    else:
                        if not line.strip():
                            continue
                        task = decode_line(line)

                    if task is None:
                        if self.strict:
                            shown = raw.decode("utf-8", errors="replace").rstrip("\r\n")
                            raise MalformedLineError(self.path.name, lineno, shown)
                        logger.warning("Skipping malformed record %s:%d", self.path.name, lineno)
                        skipped += 1
                        continue
                    tasks.append(task)
        except FileNotFoundError:
            logger.info("No backing file at %s, starting with an empty list", self.path)
            return TaskList()
        except OSError as e:
            raise StorageError(str(e))

        logger.info("Loaded %d task(s) from %s (skipped=%d)", len(tasks), self.path, skipped)
        return tasks


    def save(self, tasks: TaskList) -> None:
        """Zapisuje całą listę atomowo: plik .swap -> fsync -> os.replace."""
        tmp = self.path.with_suffix(self.path.suffix + ".swap")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with tmp.open("w", encoding="utf-8", newline="\n") as f:
                for t in tasks:
                    f.write(encode_line(t))
                    f.write("\n")
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp, self.path)
        except OSError as e:
            try:
                if tmp.exists():
                    tmp.unlink()
            except OSError:
                logger.debug("Could not remove swap file %s", tmp)
            raise StorageError(str(e))
        logger.info("Saved %d task(s) to %s", len(tasks), self.path)
