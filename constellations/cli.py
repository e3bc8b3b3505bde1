from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from .codec import TaskFormatError
from .config import default_store_dir
from .display import render_task
from .prompts import InputError, collect_task
from .store import StoreError, list_tasks, save_task

logger = logging.getLogger(__name__)


def cmd_new_task(ns: argparse.Namespace, store_dir: Path) -> int:
    task = collect_task()
    print(render_task(task), end="")
    path = save_task(store_dir, task)
    logger.info("Created %s", path)
    return 0


def cmd_print_tasks(ns: argparse.Namespace, store_dir: Path) -> int:
    for task in list_tasks(store_dir):
        print(render_task(task), end="")
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="cst",
        description="Organize the constellations of your mind",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    new = sub.add_parser("new", help="Create something new.")
    new_sub = new.add_subparsers(dest="what", required=True)
    s = new_sub.add_parser("task", help="Create a task (interactive prompts).")
    s.set_defaults(func=cmd_new_task)

    show = sub.add_parser("print", help="Print stored items.")
    show_sub = show.add_subparsers(dest="what", required=True)
    s = show_sub.add_parser("tasks", help="Print all tasks.")
    s.set_defaults(func=cmd_print_tasks)

    return p


def main(argv: Optional[list[str]] = None) -> int:
    logging.basicConfig(level=logging.WARNING, format="%(asctime)s - %(levelname)s - %(message)s")
    parser = build_parser()
    ns = parser.parse_args(argv)
    try:
        store_dir = default_store_dir()
        return int(ns.func(ns, store_dir))
    except (InputError, TaskFormatError, StoreError, OSError, RuntimeError) as e:
        print(e, file=sys.stderr)
    except (KeyboardInterrupt, EOFError):
        print("Interrupted.", file=sys.stderr)
    return 1
