from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..core.enums import ClassDay
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import AttendanceRecord
from .repository import AttendanceRepository

_COLUMNS = "student_id, class_date, present, dismissed_by, day"


def _to_record(r: dict) -> AttendanceRecord:
    day = r.get("day")
    return AttendanceRecord(
        student_id=int(r["student_id"]),
        class_date=r["class_date"],
        present=bool(r["present"]),
        dismissed_by=r.get("dismissed_by"),
        day=ClassDay(day) if day else None,
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_for_student_and_date(self, student_id: int, class_date: date) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM attendance WHERE student_id=%s AND class_date=%s",
                (int(student_id), class_date),
            )
            r = fetchone(cur)
            return _to_record(r) if r else None

    def list_for_student(self, student_id: int) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM attendance WHERE student_id=%s ORDER BY class_date DESC",
                (int(student_id),),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def list_all(self) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM attendance ORDER BY class_date, student_id")
            return [_to_record(r) for r in fetchall(cur)]

    def upsert_attendance(
        self,
        *,
        student_id: int,
        class_date: date,
        present: bool,
        day: Optional[ClassDay],
    ) -> bool:
        day_value = day.value if day else None
        with db_cursor(self._conn_factory) as (_, cur):
            if present:
                cur.execute(
                    """
                    INSERT INTO attendance(student_id, class_date, present, dismissed_by, day)
                    VALUES(%s,%s,1,NULL,%s)
                    ON DUPLICATE KEY UPDATE present=1, day=VALUES(day)
                    """,
                    (int(student_id), class_date, day_value),
                )
                return True

            cur.execute(
                """
                UPDATE attendance
                SET present=0, dismissed_by=NULL
                WHERE student_id=%s AND class_date=%s
                """,
                (int(student_id), class_date),
            )
            return cur.rowcount > 0

    def set_dismissal(self, *, student_id: int, class_date: date, responsible_name: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE attendance
                SET dismissed_by=%s
                WHERE student_id=%s AND class_date=%s AND present=1
                """,
                (responsible_name, int(student_id), class_date),
            )
            if cur.rowcount > 0:
                return True
            # Same name twice leaves rowcount at 0; the record still matches.
            cur.execute(
                "SELECT 1 AS found FROM attendance WHERE student_id=%s AND class_date=%s AND present=1",
                (int(student_id), class_date),
            )
            return fetchone(cur) is not None
