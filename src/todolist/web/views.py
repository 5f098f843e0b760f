"""HTML page routes.

Writes follow redirect-after-post: every successful form submission
answers 303 to the list page.
"""

from flask import Blueprint, abort, redirect, render_template, request, url_for

from todolist.constants import KNOWN_STATUSES
from todolist.logging import Loggers
from todolist.web import current_store
from todolist.web._utils import form_value, require_task_number

logger = Loggers.web()

bp = Blueprint("views", __name__)


@bp.route("/", methods=["GET", "POST", "PUT", "PATCH", "DELETE"])
def show_list():
    tasks = current_store().list_tasks()
    return render_template("index.html", tasks=tasks)


@bp.route("/create", methods=["GET", "POST"])
def create():
    if request.method == "GET":
        return render_template("create.html")

    task = current_store().append(form_value("task"))
    logger.info("task_created", number=task.number)
    return redirect(url_for("views.show_list"), code=303)


@bp.route("/update", methods=["GET", "POST"])
def update():
    store = current_store()

    if request.method == "POST":
        number = require_task_number(form_value("id"), positive=True)
        updated = store.update(
            number,
            form_value("task"),
            form_value("status"),
        )
        if updated is not None:
            logger.info("task_updated", number=number)
        return redirect(url_for("views.show_list"), code=303)

    number = require_task_number(request.args.get("id"), positive=True)
    task = store.get(number)
    if task is None:
        abort(404, "Task not found")

    statuses = list(KNOWN_STATUSES)
    if task.status not in statuses:
        statuses.append(task.status)
    return render_template("update.html", task=task, statuses=statuses)


@bp.route("/delete", methods=["GET"])
def delete():
    # Any sign is accepted here, unlike /update
    number = require_task_number(request.args.get("id"))
    if current_store().delete(number):
        logger.info("task_removed", number=number)
    return redirect(url_for("views.show_list"), code=303)
