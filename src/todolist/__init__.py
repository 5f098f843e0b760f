"""todolist - an in-memory task list served as HTML pages and a JSON API.

Both surfaces share one TaskStore:

- HTML pages (``/``, ``/create``, ``/update``, ``/delete``) for the browser
- JSON API (``/api/tasks``, ``/api/task``) for programmatic access

Task numbers are display positions. They are reassigned ``1..n`` on
every list read and after every delete, so a number is only meaningful
until the next structural change.
"""

from todolist.config import BaseSettings, get_settings
from todolist.tasks import InvalidTaskError, Task, TaskStore
from todolist.web import create_app

__version__ = "0.1.0"

__all__ = [
    "BaseSettings",
    "InvalidTaskError",
    "Task",
    "TaskStore",
    "create_app",
    "get_settings",
]
