from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import ClassDay
from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    """Ledger side of the record store.

    Every mutating method must run as a single atomic statement keyed on
    (student_id, class_date).
    """

    def get_for_student_and_date(self, student_id: int, class_date: date) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def list_for_student(self, student_id: int) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_all(self) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def upsert_attendance(
        self,
        *,
        student_id: int,
        class_date: date,
        present: bool,
        day: Optional[ClassDay],
    ) -> bool:
        """Write presence for (student_id, class_date).

        present=True inserts the record or flips it to present, refreshing day
        and leaving dismissed_by untouched. present=False only updates an
        existing record and clears dismissed_by. Returns False when nothing
        was written.
        """

        raise NotImplementedError

    def set_dismissal(self, *, student_id: int, class_date: date, responsible_name: str) -> bool:
        """Set dismissed_by on a present record. Returns False when none matches."""

        raise NotImplementedError
