from __future__ import annotations

import logging
from pathlib import Path

from .codec import TaskFormatError, decode_task, encode_task
from .models import RECORD_SUFFIX, Task

logger = logging.getLogger(__name__)


class StoreError(Exception):
    pass


def task_path(store_dir: Path, task: Task) -> Path:
    return store_dir / task.file_name


def _require_dir(store_dir: Path) -> None:
    if not store_dir.is_dir():
        raise StoreError(f"Task directory not found: {store_dir}")


def save_task(store_dir: Path, task: Task) -> Path:
    """
    Write the task's record to <store_dir>/<slug>.cstf.

    An existing record with the same slug is overwritten.
    """
    _require_dir(store_dir)
    path = task_path(store_dir, task)
    text = encode_task(task)
    try:
        path.write_text(text, encoding="utf-8")
    except OSError as e:
        raise StoreError(f"Unable to save task to {path}: {e.strerror or e}") from e
    logger.debug("Saved task %r to %s", task.title, path)
    return path


def _record_paths(store_dir: Path) -> list[Path]:
    # rglob never yields store_dir itself
    try:
        return [p for p in store_dir.rglob("*" + RECORD_SUFFIX) if p.is_file()]
    except OSError as e:
        raise StoreError(f"Unable to scan {store_dir}: {e.strerror or e}") from e


def list_tasks(store_dir: Path) -> list[Task]:
    """
    Decode every *.cstf file beneath store_dir, in traversal order.

    All or nothing: one record that fails to decode fails the whole listing.
    """
    _require_dir(store_dir)
    tasks: list[Task] = []
    for path in _record_paths(store_dir):
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise StoreError(f"Unable to read {path}: {e}") from e
        try:
            tasks.append(decode_task(text))
        except TaskFormatError as e:
            logger.debug("Bad task record %s: %s", path, e)
            raise StoreError("Unable to open tasks") from e
    logger.debug("Loaded %d tasks from %s", len(tasks), store_dir)
    return tasks
