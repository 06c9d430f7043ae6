from __future__ import annotations

from datetime import date

import pytest

from src.class_attendance.class_attendance.attendance.model import AttendanceRecord
from src.class_attendance.class_attendance.core.enums import DayFilter, StudentType
from src.class_attendance.class_attendance.core.exceptions import ValidationError
from src.class_attendance.class_attendance.reports.service import ReportService
from tests.fakes import InMemoryAttendance, InMemoryStudents, make_student


def _rec(student_id, d, present=True, dismissed_by=None):
    # day tag left empty on purpose: legacy rows are classified on read
    return AttendanceRecord(student_id=student_id, class_date=d, present=present, dismissed_by=dismissed_by)


@pytest.fixture
def reports():
    students = InMemoryStudents(
        [
            make_student(1, "Ana", class_name="Jardim"),
            make_student(2, "Bia", class_name="Jardim", type=StudentType.VISITOR),
            make_student(3, "Caio", class_name="Primários"),
        ]
    )
    attendance = InMemoryAttendance(
        [
            _rec(1, date(2026, 1, 4)),
            _rec(2, date(2026, 1, 4)),
            _rec(1, date(2026, 1, 7)),
            _rec(3, date(2026, 1, 11)),
            _rec(3, date(2026, 1, 14), present=False),
            _rec(1, date(2026, 2, 1)),
        ]
    )
    return ReportService(students, attendance, class_names=("Jardim", "Primários"))


def test_monthly_totals(reports):
    report = reports.monthly_report(2026, 1)

    assert report.total_presences == 4
    assert report.service_days == [date(2026, 1, 4), date(2026, 1, 7), date(2026, 1, 11)]
    assert report.unique_attendees == 3
    assert report.average_attendance == pytest.approx(4 / 3)
    assert report.average_attendance * report.service_day_count == pytest.approx(report.total_presences)
    assert report.unique_attendees <= report.total_presences


def test_rows_sorted_by_count_then_name(reports):
    rows = reports.monthly_report(2026, 1).rows

    assert [(r.name, r.presences) for r in rows] == [("Ana", 2), ("Bia", 1), ("Caio", 1)]


def test_day_filter(reports):
    sundays = reports.monthly_report(2026, 1, day_filter=DayFilter.PRIMARY)
    wednesdays = reports.monthly_report(2026, 1, day_filter=DayFilter.SECONDARY)

    assert sundays.total_presences == 3
    assert wednesdays.total_presences == 1
    assert wednesdays.service_days == [date(2026, 1, 7)]


def test_class_filter(reports):
    report = reports.monthly_report(2026, 1, class_name="Primários")

    assert report.total_presences == 1
    assert [r.name for r in report.rows] == ["Caio"]


def test_month_without_service_days_averages_zero(reports):
    report = reports.monthly_report(2025, 7)

    assert report.total_presences == 0
    assert report.service_day_count == 0
    assert report.average_attendance == 0.0


def test_december_bounds(reports):
    assert reports.monthly_report(2025, 12).total_presences == 0


def test_invalid_month(reports):
    with pytest.raises(ValidationError):
        reports.monthly_report(2026, 13)


@pytest.mark.parametrize("year, month", [(0, 1), (10000, 1), (9999, 12)])
def test_out_of_range_year(reports, year, month):
    with pytest.raises(ValidationError, match="Ano"):
        reports.monthly_report(year, month)


def test_csv_export_has_bom_and_rows(reports):
    payload = reports.monthly_report_csv(reports.monthly_report(2026, 1))
    text = payload.decode("utf-8-sig")
    lines = text.strip().splitlines()

    assert payload.startswith("\ufeff".encode("utf-8"))
    assert lines[0] == "student_id,name,class_name,type,presences"
    assert lines[1] == "1,Ana,Jardim,Membro,2"
