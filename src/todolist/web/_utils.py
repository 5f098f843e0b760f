"""Request parsing helpers shared by the page and API handlers."""

import re

from flask import abort, request

from todolist.constants import (
    INVALID_NUMBER_MESSAGE,
    MAX_TASK_NUMBER,
    MIN_TASK_NUMBER,
)

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def parse_task_number(raw: str | None) -> int | None:
    """Parse a task number from a query or form value.

    Accepts an optional sign followed by ASCII digits, nothing else,
    within signed 64-bit range.

    Returns:
        The parsed integer, or None if the value is missing or invalid.
    """
    if raw is None or not _INTEGER_RE.fullmatch(raw):
        return None
    value = int(raw)
    if not MIN_TASK_NUMBER <= value <= MAX_TASK_NUMBER:
        return None
    return value


def require_task_number(raw: str | None, *, positive: bool = False) -> int:
    """Parse a task number or abort the request with 400."""
    number = parse_task_number(raw)
    if number is None or (positive and number <= 0):
        abort(400, INVALID_NUMBER_MESSAGE)
    return number


def form_value(name: str) -> str:
    """Read a form field, falling back to the query string.

    The request body wins when both carry the field; a field present in
    neither reads as the empty string.
    """
    if name in request.form:
        return request.form[name]
    return request.args.get(name, "")
