"""JSON API routes.

``POST``, ``PUT`` and ``DELETE`` share the ``/task`` endpoint; the full
list lives at ``/tasks``. Tasks travel as
``{"number": int, "task": str, "status": str}``.
"""

import json

from flask import Blueprint, abort, jsonify, request

from todolist.logging import Loggers
from todolist.tasks import Task
from todolist.web import current_store
from todolist.web._utils import require_task_number

logger = Loggers.api()

bp = Blueprint("api", __name__)

_decoder = json.JSONDecoder()


def _task_from_body() -> Task:
    """Decode the first JSON value of the request body into a Task.

    The Content-Type is not checked and anything after the first value
    is ignored. Aborts with 400 when the body cannot be decoded.
    """
    try:
        text = request.get_data().decode("utf-8")
        data, _ = _decoder.raw_decode(text.lstrip())
        return Task.from_dict(data)
    # JSONDecodeError, UnicodeDecodeError and InvalidTaskError are all ValueErrors
    except ValueError as e:
        logger.debug("invalid_task_body", error=str(e))
        abort(400, "Invalid request body")


@bp.get("/tasks")
def read_tasks():
    tasks = current_store().list_tasks()
    return jsonify([task.to_dict() for task in tasks])


@bp.post("/task")
def create_task():
    task = current_store().append_from_payload(_task_from_body())
    logger.info("task_created", number=task.number)
    return jsonify(task.to_dict()), 201


@bp.put("/task")
def update_task():
    payload = _task_from_body()
    task = current_store().update(payload.number, payload.description, payload.status)
    if task is None:
        abort(404, "Task not found")
    logger.info("task_updated", number=task.number)
    return jsonify(task.to_dict())


@bp.delete("/task")
def delete_task():
    number = require_task_number(request.args.get("id"))
    if not current_store().delete(number):
        abort(404, "Task not found")
    logger.info("task_removed", number=number)
    return "", 204
