from __future__ import annotations

from dataclasses import dataclass
from datetime import date

RECORD_SUFFIX = ".cstf"


@dataclass(frozen=True)
class Task:
    title: str
    priority: int  # 0-255, prompted as 1-10
    due_date: date
    info: str = ""

    @property
    def slug(self) -> str:
        return self.title.replace(" ", "_").lower()

    @property
    def file_name(self) -> str:
        return self.slug + RECORD_SUFFIX
