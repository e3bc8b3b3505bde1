from datetime import date
from pathlib import Path

import pytest

from constellations import store
from constellations.codec import encode_task
from constellations.models import Task


def _task(title: str, priority: int = 3) -> Task:
    return Task(title=title, priority=priority, due_date=date(2025, 6, 1), info=f"about {title}")


def test_save_uses_slug_file_name(tmp_path: Path):
    path = store.save_task(tmp_path, _task("Buy Milk"))
    assert path == tmp_path / "buy_milk.cstf"
    assert path.read_text(encoding="utf-8") == encode_task(_task("Buy Milk"))


def test_save_overwrites_same_slug(tmp_path: Path):
    store.save_task(tmp_path, _task("Buy Milk", priority=1))
    store.save_task(tmp_path, _task("buy milk", priority=9))
    tasks = store.list_tasks(tmp_path)
    assert [(t.title, t.priority) for t in tasks] == [("buy milk", 9)]


def test_list_recurses_and_skips_other_files(tmp_path: Path):
    store.save_task(tmp_path, _task("A"))
    sub = tmp_path / "archive"
    sub.mkdir()
    (sub / "b.cstf").write_text(encode_task(_task("B")), encoding="utf-8")
    (tmp_path / "notes.txt").write_text("not a task", encoding="utf-8")
    (tmp_path / "dir.cstf").mkdir()

    tasks = store.list_tasks(tmp_path)
    assert sorted(t.title for t in tasks) == ["A", "B"]


def test_list_empty_dir(tmp_path: Path):
    assert store.list_tasks(tmp_path) == []


def test_one_bad_record_fails_whole_listing(tmp_path: Path):
    store.save_task(tmp_path, _task("A"))
    store.save_task(tmp_path, _task("B"))
    (tmp_path / "broken.cstf").write_text(
        'title: "X"\npriority: abc\ndue_date: 2024/1/1\ninfo: ""', encoding="utf-8"
    )
    with pytest.raises(store.StoreError, match="Unable to open tasks"):
        store.list_tasks(tmp_path)


def test_missing_store_dir(tmp_path: Path):
    missing = tmp_path / "nope"
    with pytest.raises(store.StoreError):
        store.list_tasks(missing)
    with pytest.raises(store.StoreError):
        store.save_task(missing, _task("A"))
    assert not missing.exists()


def test_huge_year_fails_listing(tmp_path: Path):
    store.save_task(tmp_path, _task("A"))
    (tmp_path / "far_future.cstf").write_text(
        'title: "X"\npriority: 1\ndue_date: 99999999999999999999/1/1\ninfo: ""', encoding="utf-8"
    )
    with pytest.raises(store.StoreError, match="Unable to open tasks"):
        store.list_tasks(tmp_path)
