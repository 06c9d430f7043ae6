from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from ..core.enums import ClassDay, DayFilter, StudentType
from ..students.model import Student


@dataclass(frozen=True)
class DailySnapshot:
    """Read-model for the dashboard of one date."""

    class_date: date
    class_name: str
    day: ClassDay
    present: list[Student]
    absent: list[Student]
    per_class: Optional[dict[str, int]] = None
    dismissed_by: dict[int, str] = field(default_factory=dict)

    @property
    def total_present(self) -> int:
        return len(self.present)

    @property
    def members_present(self) -> int:
        return sum(1 for s in self.present if s.type == StudentType.MEMBER)

    @property
    def visitors_present(self) -> int:
        return sum(1 for s in self.present if s.type == StudentType.VISITOR)


@dataclass(frozen=True)
class MonthlyReportRow:
    student_id: int
    name: str
    class_name: str
    type: StudentType
    presences: int


@dataclass(frozen=True)
class MonthlyReport:
    year: int
    month: int
    class_name: str
    day_filter: DayFilter
    total_presences: int
    service_days: list[date]
    unique_attendees: int
    rows: list[MonthlyReportRow] = field(default_factory=list)

    @property
    def service_day_count(self) -> int:
        return len(self.service_days)

    @property
    def average_attendance(self) -> float:
        """Presences per service day; 0.0 when the month had none."""
        if not self.service_days:
            return 0.0
        return self.total_presences / len(self.service_days)


@dataclass(frozen=True)
class HistoryRow:
    class_date: date
    present: bool
    dismissed_by: Optional[str]
    day: ClassDay


@dataclass(frozen=True)
class HistoryTally:
    day: ClassDay
    total_days: int
    present_count: int
    dismissed_count: int

    @property
    def absent_count(self) -> int:
        return self.total_days - self.present_count


@dataclass(frozen=True)
class StudentHistory:
    student: Student
    start: date
    end: date
    rows: list[HistoryRow]
    tallies: dict[ClassDay, HistoryTally]
