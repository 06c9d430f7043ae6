from __future__ import annotations

import csv
import io
from collections import Counter, defaultdict
from datetime import date
from typing import Iterable, Optional, Sequence

from ..attendance.model import AttendanceRecord
from ..attendance.repository import AttendanceRepository
from ..calendar.classifier import classify
from ..common.datetime_utils import month_bounds
from ..core.constants import ALL_CLASSES, DEFAULT_CLASS_NAMES, REPORT_CSV_FIELDS
from ..core.enums import ClassDay, DayFilter
from ..core.exceptions import NotFound, ValidationError
from ..students.model import Student
from ..students.repository import StudentRepository
from .model import (
    DailySnapshot,
    HistoryRow,
    HistoryTally,
    MonthlyReport,
    MonthlyReportRow,
    StudentHistory,
)


def _by_name(students: Iterable[Student]) -> list[Student]:
    return sorted(students, key=lambda s: (s.name.casefold(), s.student_id))


def _in_class(student: Student, class_name: str) -> bool:
    return not class_name or class_name == ALL_CLASSES or student.class_name == class_name


class ReportService:
    """Aggregations computed from the full roster and ledger on every call.

    Nothing is cached: each report reloads students and attendance through the
    repositories.
    """

    def __init__(
        self,
        students: StudentRepository,
        attendance: AttendanceRepository,
        *,
        class_names: Sequence[str] = DEFAULT_CLASS_NAMES,
    ):
        self._students = students
        self._attendance = attendance
        self._class_names = tuple(class_names)

    def _load(self) -> tuple[Sequence[Student], dict[int, dict[date, AttendanceRecord]]]:
        students = self._students.list_all()
        ledger: dict[int, dict[date, AttendanceRecord]] = defaultdict(dict)
        for rec in self._attendance.list_all():
            ledger[rec.student_id][rec.class_date] = rec
        return students, ledger

    def daily_snapshot(self, on: date, class_name: str = ALL_CLASSES) -> DailySnapshot:
        students, ledger = self._load()

        present: list[Student] = []
        absent: list[Student] = []
        dismissed_by: dict[int, str] = {}
        per_class: Optional[dict[str, int]] = None

        if not class_name or class_name == ALL_CLASSES:
            labels = list(self._class_names)
            labels += sorted({s.class_name for s in students} - set(labels))
            per_class = {label: 0 for label in labels}

        for s in students:
            if not _in_class(s, class_name):
                continue
            rec = ledger.get(s.student_id, {}).get(on)
            if rec and rec.present:
                present.append(s)
                if rec.dismissed_by:
                    dismissed_by[s.student_id] = rec.dismissed_by
                if per_class is not None:
                    per_class[s.class_name] += 1
            else:
                absent.append(s)

        return DailySnapshot(
            class_date=on,
            class_name=class_name or ALL_CLASSES,
            day=classify(on),
            present=_by_name(present),
            absent=_by_name(absent),
            per_class=per_class,
            dismissed_by=dismissed_by,
        )

    def monthly_report(
        self,
        year: int,
        month: int,
        class_name: str = ALL_CLASSES,
        day_filter: DayFilter = DayFilter.ALL,
    ) -> MonthlyReport:
        start, end = month_bounds(year, month)
        day_filter = DayFilter(day_filter)
        students, ledger = self._load()

        total = 0
        service_days: set[date] = set()
        per_student: Counter[int] = Counter()
        by_id = {s.student_id: s for s in students}

        for s in students:
            if not _in_class(s, class_name):
                continue
            for rec in ledger.get(s.student_id, {}).values():
                if not (start <= rec.class_date < end) or not rec.present:
                    continue
                if not day_filter.matches(rec.effective_day):
                    continue
                total += 1
                service_days.add(rec.class_date)
                per_student[s.student_id] += 1

        rows = [
            MonthlyReportRow(
                student_id=sid,
                name=by_id[sid].name,
                class_name=by_id[sid].class_name,
                type=by_id[sid].type,
                presences=count,
            )
            for sid, count in per_student.items()
        ]
        rows.sort(key=lambda r: (-r.presences, r.name.casefold()))

        return MonthlyReport(
            year=int(year),
            month=int(month),
            class_name=class_name or ALL_CLASSES,
            day_filter=day_filter,
            total_presences=total,
            service_days=sorted(service_days),
            unique_attendees=len(per_student),
            rows=rows,
        )

    def monthly_report_csv(self, report: MonthlyReport) -> bytes:
        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=list(REPORT_CSV_FIELDS))
        writer.writeheader()
        for r in report.rows:
            writer.writerow(
                {
                    "student_id": r.student_id,
                    "name": r.name,
                    "class_name": r.class_name,
                    "type": r.type.value,
                    "presences": r.presences,
                }
            )
        return out.getvalue().encode("utf-8-sig")

    def attendance_history(self, student_id: int, start: date, end: date) -> StudentHistory:
        """Per-student history over the class dates observed in [start, end].

        Class dates come from every student's attendance records, unmarked ones
        included, so a date with no record at all never appears.
        """

        if start > end:
            raise ValidationError("A data inicial deve ser anterior à data final")

        students, ledger = self._load()
        student = next((s for s in students if s.student_id == int(student_id)), None)
        if not student:
            raise NotFound("Aluno não encontrado")

        observed = {
            rec.class_date
            for records in ledger.values()
            for rec in records.values()
            if start <= rec.class_date <= end and classify(rec.class_date).is_class_day
        }

        own = ledger.get(student.student_id, {})
        rows: list[HistoryRow] = []
        totals: Counter[ClassDay] = Counter()
        presents: Counter[ClassDay] = Counter()
        dismissals: Counter[ClassDay] = Counter()

        for d in sorted(observed, reverse=True):
            day = classify(d)
            rec = own.get(d)
            is_present = bool(rec and rec.present)
            dismissed_by = rec.dismissed_by if is_present else None

            rows.append(HistoryRow(class_date=d, present=is_present, dismissed_by=dismissed_by, day=day))
            totals[day] += 1
            if is_present:
                presents[day] += 1
                if dismissed_by:
                    dismissals[day] += 1

        tallies = {
            day: HistoryTally(
                day=day,
                total_days=totals[day],
                present_count=presents[day],
                dismissed_count=dismissals[day],
            )
            for day in (ClassDay.PRIMARY, ClassDay.SECONDARY)
        }

        return StudentHistory(student=student, start=start, end=end, rows=rows, tallies=tallies)
