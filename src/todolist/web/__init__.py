"""Flask application factory.

The app is bound to one explicit TaskStore, kept in ``app.extensions``
and shared by the page blueprint and the API blueprint. Tests build a
fresh store per app.

Example:
    >>> app = create_app(BaseSettings(), TaskStore())
    >>> client = app.test_client()
    >>> client.get("/api/tasks").get_json()
    []
"""

import uuid

from flask import Flask, current_app, jsonify, make_response, request
from werkzeug.exceptions import HTTPException

from todolist.config import BaseSettings, get_settings
from todolist.logging import Loggers, bind_context, clear_context
from todolist.tasks import TaskStore

logger = Loggers.web()

STORE_EXTENSION = "todolist.store"
API_PREFIX = "/api"


def current_store() -> TaskStore:
    """Return the task store bound to the running app."""
    return current_app.extensions[STORE_EXTENSION]


def _is_api_request() -> bool:
    return request.path == API_PREFIX or request.path.startswith(API_PREFIX + "/")


def handle_http_error(error: HTTPException):
    """Render HTTP errors as JSON under /api and as plain text elsewhere."""
    if _is_api_request():
        response = jsonify(error=error.description)
    else:
        response = make_response(f"{error.description}\n")
        response.content_type = "text/plain; charset=utf-8"
    response.status_code = error.code or 500
    for name, value in error.get_headers():
        if name.lower() != "content-type":
            response.headers[name] = value
    return response


def create_app(
    settings: BaseSettings | None = None,
    store: TaskStore | None = None,
) -> Flask:
    """Build the Flask app.

    Args:
        settings: Settings to run with. Defaults to get_settings().
        store: Task store to serve. Defaults to a new, empty store using
            the configured default status.

    Returns:
        Configured Flask application.
    """
    from todolist.web.api import bp as api_bp
    from todolist.web.views import bp as views_bp

    settings = settings or get_settings()
    if store is None:
        store = TaskStore(default_status=settings.default_status)

    app = Flask("todolist")
    app.config["DEBUG"] = settings.debug
    # Keep the number, task, status key order on the wire
    app.json.sort_keys = False

    app.extensions[STORE_EXTENSION] = store

    app.register_blueprint(views_bp)
    app.register_blueprint(api_bp, url_prefix=API_PREFIX)
    app.register_error_handler(HTTPException, handle_http_error)

    @app.before_request
    def _bind_request_context() -> None:
        bind_context(
            request_id=uuid.uuid4().hex[:8],
            method=request.method,
            path=request.path,
        )

    @app.after_request
    def _log_request(response):
        logger.info("request_handled", status=response.status_code)
        return response

    @app.teardown_request
    def _clear_request_context(exc: BaseException | None) -> None:
        clear_context()

    logger.debug("app_created", default_status=store.default_status)
    return app


__all__ = ["create_app", "current_store"]
