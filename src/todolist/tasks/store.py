"""Shared in-memory task store.

One ordered list of tasks plus a monotonic id counter, guarded by a
single mutex. Every read and every write takes the same lock, so list
reads serialize with each other as well as with writes.

Task numbers are display positions, not identifiers: the list is
renumbered ``1..n`` on every read and after every delete, so a number
handed out earlier may point at a different task later. Freshly
appended tasks carry a provisional number taken from the id counter
until the next renumber corrects it.

Example:
    >>> store = TaskStore()
    >>> store.append("Write report")
    Task(number=1, description='Write report', status='Not Started')
    >>> store.update(1, "Write final report", "In Progress")
    Task(number=1, description='Write final report', status='In Progress')
    >>> store.delete(1)
    True
"""

import threading
from dataclasses import dataclass, replace
from typing import Any

from todolist.constants import DEFAULT_STATUS
from todolist.logging import Loggers

logger = Loggers.store()


class InvalidTaskError(ValueError):
    """Raised when a task payload cannot be decoded."""


# Wire key -> (attribute, JSON type)
_WIRE_FIELDS: dict[str, tuple[str, type]] = {
    "number": ("number", int),
    "task": ("description", str),
    "status": ("status", str),
}


@dataclass
class Task:
    """A single task entry.

    ``description`` is exposed as ``task`` on the wire.
    """

    number: int
    description: str = ""
    status: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "number": self.number,
            "task": self.description,
            "status": self.status,
        }

    @classmethod
    def from_dict(cls, data: Any) -> "Task":
        """Decode a task from a parsed JSON payload.

        Keys match ``number``, ``task`` and ``status`` regardless of
        case; when several spellings appear the last one wins. A null
        payload or null value leaves the zero value in place, and
        unknown keys are ignored.

        Raises:
            InvalidTaskError: If the payload is not an object or a field
                has the wrong type.
        """
        task = cls(number=0)
        if data is None:
            return task
        if not isinstance(data, dict):
            raise InvalidTaskError("task payload must be a JSON object")

        for key, value in data.items():
            field = _WIRE_FIELDS.get(key.lower())
            if field is None or value is None:
                continue
            attr, expected = field
            # bool is an int subclass but never a valid number
            if not isinstance(value, expected) or isinstance(value, bool):
                kind = "an integer" if expected is int else "a string"
                raise InvalidTaskError(f"'{key}' must be {kind}")
            setattr(task, attr, value)
        return task


class TaskStore:
    """Ordered task list shared by every request handler.

    All public methods acquire the store lock for their whole duration
    and hand back copies, so callers never touch the shared list
    outside the lock.
    """

    def __init__(self, default_status: str = DEFAULT_STATUS) -> None:
        self._default_status = default_status
        self._tasks: list[Task] = []
        self._next_id = 1
        self._lock = threading.Lock()

    @property
    def default_status(self) -> str:
        """Status given to every newly created task."""
        return self._default_status

    def _renumber(self) -> None:
        for index, task in enumerate(self._tasks):
            task.number = index + 1

    def _find(self, number: int) -> int | None:
        for index, task in enumerate(self._tasks):
            if task.number == number:
                return index
        return None

    def _take_id(self) -> int:
        task_id = self._next_id
        self._next_id += 1
        return task_id

    def renumber(self) -> None:
        """Reassign ``number = index + 1`` to every task in order."""
        with self._lock:
            self._renumber()

    def list_tasks(self) -> list[Task]:
        """Renumber and return the full task list."""
        with self._lock:
            self._renumber()
            return [replace(task) for task in self._tasks]

    def append(self, description: str, status: str | None = None) -> Task:
        """Append a task at the end of the list.

        The task gets the next id as its provisional number. The list is
        not renumbered.

        Args:
            description: Free-form task text. May be empty.
            status: Initial status. Defaults to the store's default status.

        Returns:
            A copy of the stored task.
        """
        with self._lock:
            task = Task(
                number=self._take_id(),
                description=description,
                status=self._default_status if status is None else status,
            )
            self._tasks.append(task)
            logger.debug("task_appended", number=task.number, size=len(self._tasks))
            return replace(task)

    def append_from_payload(self, task: Task) -> Task:
        """Append a caller-supplied task.

        The caller's number and status are discarded: the task gets the
        next id and the default status. The list is not renumbered, so
        the returned number is provisional.
        """
        with self._lock:
            stored = Task(
                number=self._take_id(),
                description=task.description,
                status=self._default_status,
            )
            self._tasks.append(stored)
            logger.debug("task_appended", number=stored.number, size=len(self._tasks))
            return replace(stored)

    def get(self, number: int) -> Task | None:
        """Return the first task with this number, or None."""
        with self._lock:
            index = self._find(number)
            if index is None:
                return None
            return replace(self._tasks[index])

    def update(self, number: int, description: str, status: str) -> Task | None:
        """Overwrite description and status of the first matching task.

        Returns:
            A copy of the updated task, or None if no task has this number.
        """
        with self._lock:
            index = self._find(number)
            if index is None:
                logger.debug("task_update_missed", number=number)
                return None
            task = self._tasks[index]
            task.description = description
            task.status = status
            logger.debug("task_updated", number=number, status=status)
            return replace(task)

    def delete(self, number: int) -> bool:
        """Remove the first matching task and renumber the rest.

        The list is renumbered even when nothing matched.

        Returns:
            True if a task was removed, False otherwise.
        """
        with self._lock:
            index = self._find(number)
            if index is not None:
                del self._tasks[index]
            self._renumber()
            logger.debug(
                "task_deleted" if index is not None else "task_delete_missed",
                number=number,
                size=len(self._tasks),
            )
            return index is not None

    def is_empty(self) -> bool:
        """Check if the store has any tasks."""
        with self._lock:
            return not self._tasks

    def __len__(self) -> int:
        with self._lock:
            return len(self._tasks)
