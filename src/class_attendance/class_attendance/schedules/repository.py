from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import ScheduleEntry


class ScheduleRepository(Protocol):
    def list_all(self) -> Sequence[ScheduleEntry]:
        """All entries ordered by date."""

        raise NotImplementedError

    def list_for_date(self, class_date: date) -> Sequence[ScheduleEntry]:
        raise NotImplementedError

    def upsert(self, entry: ScheduleEntry) -> None:
        """Create or replace the entry keyed on (class_date, class_name)."""

        raise NotImplementedError

    def get(self, *, class_date: date, class_name: str) -> Optional[ScheduleEntry]:
        raise NotImplementedError
