"""Terminal rendering of tasks.

Priority and due date are each colored by one of four urgency bands.
Color is on for a TTY or FORCE_COLOR=1, and always off under NO_COLOR.
"""
from __future__ import annotations

import os
import sys
from datetime import date, datetime, timezone
from typing import Optional

from .models import Task

RESET = "\033[0m"
BLUE = "\033[34m"
WHITE = "\033[37m"
CYAN = "\033[36m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
RED = "\033[31m"

TITLE_COLOR = BLUE
LABEL_COLOR = WHITE

# Band 1 is the least important priority but the most urgent due date.
PRIORITY_COLORS = {1: CYAN, 2: GREEN, 3: YELLOW, 4: RED}
DUE_COLORS = {1: RED, 2: YELLOW, 3: GREEN, 4: CYAN}


def color_enabled() -> bool:
    if os.environ.get("NO_COLOR") is not None:
        return False
    force = os.environ.get("FORCE_COLOR", "").lower() in {"1", "true", "yes", "on"}
    return force or sys.stdout.isatty()


def utc_today() -> date:
    return datetime.now(timezone.utc).date()


def priority_band(priority: int) -> int:
    if priority <= 2:
        return 1
    if priority <= 6:
        return 2
    if priority <= 9:
        return 3
    return 4


def due_band(due_date: date, today: date) -> int:
    """Overdue and due within a day -> 1, a week -> 2, two weeks -> 3, later -> 4."""
    days = (due_date - today).days
    if days <= 1:
        return 1
    if days <= 7:
        return 2
    if days <= 14:
        return 3
    return 4


def render_task(task: Task, today: Optional[date] = None, use_color: Optional[bool] = None) -> str:
    if today is None:
        today = utc_today()
    if use_color is None:
        use_color = color_enabled()

    def paint(text: str, code: str) -> str:
        return code + text if use_color else text

    lines = [
        paint(task.title, TITLE_COLOR),
        paint("Priority: ", LABEL_COLOR)
        + paint(str(task.priority), PRIORITY_COLORS[priority_band(task.priority)]),
        paint("Due Date: ", LABEL_COLOR)
        + paint(task.due_date.isoformat(), DUE_COLORS[due_band(task.due_date, today)])
        + (RESET if use_color else ""),
        "",
        task.info,
        "",
    ]
    return "\n".join(lines) + "\n"
