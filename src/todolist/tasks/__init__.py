"""Task storage shared by the HTML pages and the JSON API.

Example:
    >>> store = TaskStore()
    >>> task = store.append("Buy milk")
    >>> store.list_tasks()[0].number
    1
"""

from todolist.tasks.store import InvalidTaskError, Task, TaskStore

__all__ = ["InvalidTaskError", "Task", "TaskStore"]
