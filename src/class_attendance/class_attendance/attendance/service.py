from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from ..calendar.classifier import require_class_day
from ..common.validators import require_non_empty
from ..core.exceptions import NoAttendanceRecord, NotFound
from ..students.repository import StudentRepository
from .model import AttendanceRecord
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceLedger:
    """Use cases that create and mutate attendance records.

    Records are written only through these methods; each one maps to a single
    atomic repository call.
    """

    def __init__(self, attendance: AttendanceRepository, students: StudentRepository):
        self._attendance = attendance
        self._students = students

    def _require_student(self, student_id: int):
        student = self._students.get_by_id(int(student_id))
        if not student:
            raise NotFound("Aluno não encontrado")
        return student

    def mark_present(self, student_id: int, class_date: date) -> AttendanceRecord:
        day = require_class_day(class_date)
        student = self._require_student(student_id)

        self._attendance.upsert_attendance(
            student_id=student.student_id,
            class_date=class_date,
            present=True,
            day=day,
        )
        logger.info("Presence marked: student=%s date=%s day=%s", student.student_id, class_date, day.value)
        return self._attendance.get_for_student_and_date(student.student_id, class_date)

    def unmark_present(self, student_id: int, class_date: date) -> Optional[AttendanceRecord]:
        """Retract presence and dismissal. No class day gate; no-op without a record."""

        student = self._require_student(student_id)
        if self._attendance.upsert_attendance(
            student_id=student.student_id,
            class_date=class_date,
            present=False,
            day=None,
        ):
            logger.info("Presence unmarked: student=%s date=%s", student.student_id, class_date)
        return self._attendance.get_for_student_and_date(student.student_id, class_date)

    def set_presence(self, student_id: int, class_date: date, present: bool) -> Optional[AttendanceRecord]:
        if present:
            return self.mark_present(student_id, class_date)
        return self.unmark_present(student_id, class_date)

    def record_dismissal(self, student_id: int, responsible_name: str, class_date: date) -> AttendanceRecord:
        responsible_name = require_non_empty(responsible_name, "Nome do responsável")
        student = self._require_student(student_id)

        if not self._attendance.set_dismissal(
            student_id=student.student_id,
            class_date=class_date,
            responsible_name=responsible_name,
        ):
            logger.warning("Dismissal rejected: student=%s date=%s has no presence", student.student_id, class_date)
            raise NoAttendanceRecord(f"{student.name} não tem presença marcada em {class_date:%d/%m/%Y}")

        logger.info("Dismissal recorded: student=%s date=%s by=%s", student.student_id, class_date, responsible_name)
        return self._attendance.get_for_student_and_date(student.student_id, class_date)

    def attendance_on(self, student_id: int, class_date: date) -> Optional[AttendanceRecord]:
        return self._attendance.get_for_student_and_date(int(student_id), class_date)
