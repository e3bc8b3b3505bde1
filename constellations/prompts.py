from __future__ import annotations

from datetime import date
from typing import Callable, Optional

from .codec import PRIORITY_MAX, QUOTE
from .models import Task

PROMPT = ">> "

ReadLine = Callable[[str], str]
Write = Callable[[str], None]


class InputError(ValueError):
    pass


def _no_quotes(value: str, what: str) -> str:
    if QUOTE in value:
        raise InputError(f"The {what} must not contain '{QUOTE}'.")
    return value


def _ascii_int(text: str) -> int:
    text = text.strip()
    if not (text.isascii() and text.isdigit()):
        raise ValueError(f"not a plain number: {text!r}")
    return int(text)


def parse_priority(line: str) -> int:
    try:
        value = _ascii_int(line)
    except ValueError as e:
        raise InputError(f"Invalid priority '{line}'. Use a whole number.") from e
    if not 0 <= value <= PRIORITY_MAX:
        raise InputError(f"Invalid priority '{line}'. Use 0-{PRIORITY_MAX}.")
    return value


def parse_due_date(line: str) -> date:
    parts = line.strip().split("-")
    if len(parts) != 3:
        raise InputError(f"Invalid date '{line}'. Use YYYY-MM-DD.")
    try:
        year, month, day = (_ascii_int(p) for p in parts)
        return date(year, month, day)
    except (ValueError, OverflowError) as e:
        raise InputError(f"Invalid date '{line}'. Use YYYY-MM-DD.") from e


def read_notes(read_line: ReadLine) -> str:
    """Collect lines until ctrl-d or ctrl-c; either one just ends the notes."""
    info = ""
    while True:
        try:
            line = read_line(PROMPT)
        except (EOFError, KeyboardInterrupt):
            break
        info += line + "\n"
    return info.strip()


def collect_task(read_line: Optional[ReadLine] = None, write: Optional[Write] = None) -> Task:
    """
    Ask for title, priority, due date and notes.

    EOFError/KeyboardInterrupt before the notes prompt propagate to the caller.
    """
    read_line = read_line or input
    write = write or print

    write("What's the task?")
    title = _no_quotes(read_line(PROMPT), "title")
    if not title.strip():
        raise InputError("Title required.")

    write("What's the priority? (1 - 10)")
    priority = parse_priority(read_line(PROMPT))

    write("What's the due date? (yyyy-mm-dd)")
    due_date = parse_due_date(read_line(PROMPT))

    write("Any notes? (ctrl-d) to finish")
    info = _no_quotes(read_notes(read_line), "notes")

    return Task(title=title, priority=priority, due_date=due_date, info=info)
