from __future__ import annotations

from datetime import date
from typing import Optional, Tuple

from .models import Task

WHITESPACE = " \t\r\n"
QUOTE = '"'
PRIORITY_MAX = 255


class TaskFormatError(ValueError):
    """A record does not match the task grammar, or a task cannot be written as one."""

    def __init__(self, message: str, offset: Optional[int] = None) -> None:
        if offset is not None:
            message = f"{message} (at offset {offset})"
        super().__init__(message)
        self.offset = offset


def encode_task(task: Task) -> str:
    """
    Render a task in the record layout:

        title: "<title>"
        priority: <priority>
        due_date: <yyyy>/<mm>/<dd>
        info: "<info>"

    Quotes are not escaped, so a title or info containing one is refused.
    """
    for field_name in ("title", "info"):
        if QUOTE in getattr(task, field_name):
            raise TaskFormatError(f"Task {field_name} must not contain '{QUOTE}'.")
    if not 0 <= task.priority <= PRIORITY_MAX:
        raise TaskFormatError(f"Priority must be between 0 and {PRIORITY_MAX}, got {task.priority}.")

    due = task.due_date.isoformat().replace("-", "/")
    return (
        f'title: "{task.title}"\n'
        f"priority: {task.priority}\n"
        f"due_date: {due}\n"
        f'info: "{task.info}"'
    )


# Each step takes the text and a cursor and returns the advanced cursor,
# plus the captured value where there is one.


def _skip_ws(text: str, pos: int) -> int:
    while pos < len(text) and text[pos] in WHITESPACE:
        pos += 1
    return pos


def _literal(text: str, pos: int, lit: str) -> int:
    if not text.startswith(lit, pos):
        raise TaskFormatError(f"Expected {lit!r}", pos)
    return pos + len(lit)


def _key(text: str, pos: int, name: str) -> int:
    pos = _literal(text, _skip_ws(text, pos), name)
    pos = _literal(text, _skip_ws(text, pos), ":")
    return _skip_ws(text, pos)


def _quoted(text: str, pos: int) -> Tuple[int, str]:
    pos = _literal(text, pos, QUOTE)
    end = text.find(QUOTE, pos)
    if end == -1:
        raise TaskFormatError("Unterminated quoted field", pos)
    return end + 1, text[pos:end]


def _digits(text: str, pos: int) -> Tuple[int, int]:
    end = pos
    # ASCII only
    while end < len(text) and "0" <= text[end] <= "9":
        end += 1
    if end == pos:
        raise TaskFormatError("Expected digits", pos)
    try:
        return end, int(text[pos:end])
    except ValueError as e:
        # over sys.get_int_max_str_digits()
        raise TaskFormatError("Number too long", pos) from e


def _title(text: str, pos: int) -> Tuple[int, str]:
    return _quoted(text, _key(text, pos, "title"))


def _priority(text: str, pos: int) -> Tuple[int, int]:
    start = _key(text, pos, "priority")
    pos, value = _digits(text, start)
    if value > PRIORITY_MAX:
        raise TaskFormatError(f"Priority {value} is out of range 0-{PRIORITY_MAX}", start)
    return pos, value


def _due_date(text: str, pos: int) -> Tuple[int, date]:
    start = _key(text, pos, "due_date")
    pos, year = _digits(text, start)
    pos, month = _digits(text, _literal(text, pos, "/"))
    pos, day = _digits(text, _literal(text, pos, "/"))
    try:
        return pos, date(year, month, day)
    except (ValueError, OverflowError) as e:
        raise TaskFormatError(f"Invalid due date {year}/{month}/{day}: {e}", start) from e


def _info(text: str, pos: int) -> Tuple[int, str]:
    return _quoted(text, _key(text, pos, "info"))


def decode_task(text: str) -> Task:
    """Parse one record. Raises TaskFormatError on any mismatch; never returns a partial task."""
    pos, title = _title(text, 0)
    pos, priority = _priority(text, pos)
    pos, due_date = _due_date(text, pos)
    pos, info = _info(text, pos)

    pos = _skip_ws(text, pos)
    if pos != len(text):
        raise TaskFormatError("Unexpected trailing content", pos)

    return Task(title=title, priority=priority, due_date=due_date, info=info)
