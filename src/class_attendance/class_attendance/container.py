from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceLedger
from .core.constants import DEFAULT_CLASS_NAMES
from .data.service import DataService
from .database.connection import DBConfig, DatabaseConnection
from .reports.service import ReportService
from .schedules.mysql_schedule_repository import MySQLScheduleRepository
from .schedules.repository import ScheduleRepository
from .schedules.service import ScheduleService
from .students.mysql_student_repository import MySQLStudentRepository
from .students.repository import StudentRepository
from .students.service import StudentService
from .topics.mysql_topic_repository import MySQLTopicRepository
from .topics.repository import TopicRepository
from .topics.service import TopicService
from .volunteers.mysql_volunteer_repository import MySQLVolunteerRepository
from .volunteers.repository import VolunteerRepository
from .volunteers.service import VolunteerService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]
    class_names: tuple[str, ...]

    students_repo: StudentRepository
    attendance_repo: AttendanceRepository
    volunteers_repo: VolunteerRepository
    schedules_repo: ScheduleRepository
    topics_repo: TopicRepository

    student_service: StudentService
    ledger: AttendanceLedger
    report_service: ReportService
    schedule_service: ScheduleService
    volunteer_service: VolunteerService
    topic_service: TopicService
    data_service: DataService


def wire(
    *,
    students_repo: StudentRepository,
    attendance_repo: AttendanceRepository,
    volunteers_repo: VolunteerRepository,
    schedules_repo: ScheduleRepository,
    topics_repo: TopicRepository,
    class_names: Sequence[str] = DEFAULT_CLASS_NAMES,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    """Build every service on top of the given repositories."""

    class_names = tuple(class_names)
    return Container(
        conn=conn,
        class_names=class_names,
        students_repo=students_repo,
        attendance_repo=attendance_repo,
        volunteers_repo=volunteers_repo,
        schedules_repo=schedules_repo,
        topics_repo=topics_repo,
        student_service=StudentService(students_repo, class_names=class_names),
        ledger=AttendanceLedger(attendance_repo, students_repo),
        report_service=ReportService(students_repo, attendance_repo, class_names=class_names),
        schedule_service=ScheduleService(schedules_repo, volunteers_repo, class_names=class_names),
        volunteer_service=VolunteerService(volunteers_repo),
        topic_service=TopicService(topics_repo),
        data_service=DataService(students_repo, attendance_repo, volunteers_repo, schedules_repo, topics_repo),
    )


def build_container(*, db_config: dict, class_names: Sequence[str] = DEFAULT_CLASS_NAMES) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    return wire(
        students_repo=MySQLStudentRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        volunteers_repo=MySQLVolunteerRepository(conn),
        schedules_repo=MySQLScheduleRepository(conn),
        topics_repo=MySQLTopicRepository(conn),
        class_names=class_names,
        conn=conn,
    )
