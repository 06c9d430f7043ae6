from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass

from ..attendance.model import AttendanceRecord
from ..attendance.repository import AttendanceRepository
from ..schedules.model import ScheduleEntry
from ..schedules.repository import ScheduleRepository
from ..students.model import Student
from ..students.repository import StudentRepository
from ..topics.model import Topic
from ..topics.repository import TopicRepository
from ..volunteers.model import Volunteer
from ..volunteers.repository import VolunteerRepository


@dataclass(frozen=True)
class DataSnapshot:
    students: list[tuple[Student, list[AttendanceRecord]]]
    volunteers: list[Volunteer]
    schedule: list[ScheduleEntry]
    topics: list[Topic]


class DataService:
    """Bulk read of every record, for clients that load everything at once."""

    def __init__(
        self,
        students: StudentRepository,
        attendance: AttendanceRepository,
        volunteers: VolunteerRepository,
        schedules: ScheduleRepository,
        topics: TopicRepository,
    ):
        self._students = students
        self._attendance = attendance
        self._volunteers = volunteers
        self._schedules = schedules
        self._topics = topics

    def load_all(self) -> DataSnapshot:
        by_student: dict[int, list[AttendanceRecord]] = defaultdict(list)
        for rec in self._attendance.list_all():
            by_student[rec.student_id].append(rec)

        students = sorted(self._students.list_all(), key=lambda s: s.name.casefold())
        return DataSnapshot(
            students=[(s, sorted(by_student.get(s.student_id, []), key=lambda r: r.class_date)) for s in students],
            volunteers=sorted(self._volunteers.list_all(), key=lambda v: v.name.casefold()),
            schedule=sorted(self._schedules.list_all(), key=lambda e: (e.class_date, e.class_name)),
            topics=sorted(self._topics.list_all(), key=lambda t: t.class_date, reverse=True),
        )
