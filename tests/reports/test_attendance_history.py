from __future__ import annotations

from datetime import date

import pytest

from src.class_attendance.class_attendance.attendance.model import AttendanceRecord
from src.class_attendance.class_attendance.attendance.service import AttendanceLedger
from src.class_attendance.class_attendance.core.enums import ClassDay
from src.class_attendance.class_attendance.core.exceptions import NotFound, ValidationError
from src.class_attendance.class_attendance.reports.service import ReportService
from tests.fakes import InMemoryAttendance, InMemoryStudents, make_student


@pytest.fixture
def reports():
    students = InMemoryStudents([make_student(1, "Ana"), make_student(2, "Bia")])
    attendance = InMemoryAttendance(
        [
            AttendanceRecord(1, date(2026, 1, 4), True, "Mãe"),
            AttendanceRecord(2, date(2026, 1, 4), True),
            AttendanceRecord(2, date(2026, 1, 7), True),
            AttendanceRecord(1, date(2026, 1, 11), True),
            AttendanceRecord(2, date(2026, 1, 14), False),
            AttendanceRecord(2, date(2026, 1, 25), True),
        ]
    )
    return ReportService(students, attendance)


def test_history_uses_dates_from_all_students(reports):
    history = reports.attendance_history(1, date(2026, 1, 1), date(2026, 1, 31))

    assert [r.class_date for r in history.rows] == [
        date(2026, 1, 25),
        date(2026, 1, 14),
        date(2026, 1, 11),
        date(2026, 1, 7),
        date(2026, 1, 4),
    ]
    assert [r.present for r in history.rows] == [False, False, True, False, True]
    assert history.rows[-1].dismissed_by == "Mãe"
    assert history.rows[1].day == ClassDay.SECONDARY


def test_history_tallies_by_day_type(reports):
    history = reports.attendance_history(1, date(2026, 1, 1), date(2026, 1, 31))
    sunday = history.tallies[ClassDay.PRIMARY]
    wednesday = history.tallies[ClassDay.SECONDARY]

    assert (sunday.total_days, sunday.present_count, sunday.absent_count, sunday.dismissed_count) == (3, 2, 1, 1)
    assert (wednesday.total_days, wednesday.present_count, wednesday.absent_count) == (2, 0, 2)


def test_history_range_is_inclusive(reports):
    history = reports.attendance_history(2, date(2026, 1, 7), date(2026, 1, 11))

    assert [r.class_date for r in history.rows] == [date(2026, 1, 11), date(2026, 1, 7)]


def test_history_errors(reports):
    with pytest.raises(NotFound):
        reports.attendance_history(42, date(2026, 1, 1), date(2026, 1, 31))
    with pytest.raises(ValidationError):
        reports.attendance_history(1, date(2026, 2, 1), date(2026, 1, 1))


def test_unmarked_record_still_counts_as_observed_date(sunday, wednesday):
    students = InMemoryStudents([make_student(1, "Ana"), make_student(2, "Bia")])
    attendance = InMemoryAttendance()
    ledger = AttendanceLedger(attendance, students)
    ledger.mark_present(1, sunday)
    ledger.mark_present(2, wednesday)
    ledger.unmark_present(2, wednesday)

    history = ReportService(students, attendance).attendance_history(1, date(2026, 1, 1), date(2026, 1, 31))

    assert [(r.class_date, r.present) for r in history.rows] == [(wednesday, False), (sunday, True)]
    assert history.tallies[ClassDay.SECONDARY].total_days == 1
