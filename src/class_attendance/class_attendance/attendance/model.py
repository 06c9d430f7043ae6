from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..calendar.classifier import classify
from ..core.enums import ClassDay


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: presence of one student on one class date.

    Invariant: dismissed_by is None whenever present is False.
    """

    student_id: int
    class_date: date
    present: bool
    dismissed_by: Optional[str] = None
    day: Optional[ClassDay] = None

    @property
    def effective_day(self) -> ClassDay:
        # The stored tag is only a cache; legacy rows lack it.
        return classify(self.class_date)

    @property
    def is_dismissed(self) -> bool:
        return self.present and bool(self.dismissed_by)
