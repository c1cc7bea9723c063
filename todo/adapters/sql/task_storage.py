from __future__ import annotations
import logging
import sqlalchemy as db
from sqlalchemy.exc import SQLAlchemyError
from pathlib import Path
from todo.ports.task_storage import TaskStorage
from todo.domain.task import Task
from todo.domain.task_list import TaskList
from todo.domain.errors import StorageError

logger = logging.getLogger(__name__)


class SqlTaskStorage(TaskStorage):
    def __init__(self, url: str | Path) -> None:
        """
        url: np. 'sqlite:///data/tasks.db' lub Path do pliku (zostanie zrobiony URL)
        """
        if isinstance(url, Path):
            url.parent.mkdir(parents=True, exist_ok=True)
            db_url = f"sqlite:///{url}"
        else:
            db_url = url

        self.engine = db.create_engine(db_url, future=True)
        self.meta = db.MetaData()

        # kolumna position = pozycja 1-based na liście
        self.tasks = db.Table(
            "tasks",
            self.meta,
            db.Column("position", db.Integer, primary_key=True, autoincrement=False),
            db.Column("title", db.String, nullable=False),
            db.Column("description", db.String, nullable=False, default=""),
            db.Column("due_date", db.String, nullable=False),
            db.Column("completed", db.Boolean, nullable=False, default=False),
        )

        # utwórz tabelę jeśli nie istnieje
        try:
            self.meta.create_all(self.engine)
        except SQLAlchemyError as e:
            raise StorageError(str(e))

    def _to_row(self, position: int, task: Task) -> dict:
        return {
            'position': position,
            'title': task.title,
            'description': task.description,
            'due_date': task.due_date,
            'completed': bool(task.completed),
        }

    def _from_row(self, row) -> Task:
        return Task(
            title=row["title"],
            description=row["description"] or "",
            due_date=row["due_date"],
            completed=bool(row["completed"]),
        )

    def load(self) -> TaskList:
        stmt = db.select(self.tasks).order_by(self.tasks.c.position.asc())
        try:
            with self.engine.connect() as conn:
                rows = conn.execute(stmt).mappings().all()
        except SQLAlchemyError as e:
            raise StorageError(str(e))
        logger.info("Loaded %d task(s) from %s", len(rows), self.engine.url)
        return TaskList(self._from_row(r) for r in rows)

    def save(self, tasks: TaskList) -> None:
        """Podmienia wszystkie wiersze w jednej transakcji."""
        rows = [self._to_row(position, task) for position, task in tasks.enumerate()]
        try:
            with self.engine.begin() as conn:
                conn.execute(db.delete(self.tasks))
                if rows:
                    conn.execute(db.insert(self.tasks), rows)
        except SQLAlchemyError as e:
            raise StorageError(str(e))
        logger.info("Saved %d task(s) to %s", len(rows), self.engine.url)
