from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import StudentType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Student, StudentDraft
from .repository import StudentRepository

_COLUMNS = "student_id, name, class_name, age, guardian_name, phone, type"
_UPDATABLE = ("name", "class_name", "age", "guardian_name", "phone")


def _to_student(r: dict) -> Student:
    return Student(
        student_id=int(r["student_id"]),
        name=r["name"],
        class_name=r["class_name"],
        age=int(r["age"]),
        guardian_name=r["guardian_name"],
        phone=r["phone"],
        type=StudentType(r["type"]),
    )


class MySQLStudentRepository(StudentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, student_id: int) -> Optional[Student]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM students WHERE student_id=%s", (int(student_id),))
            r = fetchone(cur)
            return _to_student(r) if r else None

    def list_all(self) -> Sequence[Student]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM students ORDER BY name")
            return [_to_student(r) for r in fetchall(cur)]

    def create(self, draft: StudentDraft, *, student_type: StudentType) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO students(name, class_name, age, guardian_name, phone, type)
                VALUES(%s,%s,%s,%s,%s,%s)
                """,
                (draft.name, draft.class_name, int(draft.age), draft.guardian_name, draft.phone, student_type.value),
            )
            return int(cur.lastrowid)

    def update(self, student_id: int, fields: dict) -> bool:
        columns = [c for c in _UPDATABLE if c in fields]
        if not columns:
            return self.get_by_id(student_id) is not None

        assignments = ", ".join(f"{c}=%s" for c in columns)
        params = [fields[c] for c in columns] + [int(student_id)]
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"UPDATE students SET {assignments} WHERE student_id=%s", tuple(params))
            if cur.rowcount > 0:
                return True
            # MySQL reports 0 affected rows when values are unchanged.
            cur.execute("SELECT 1 AS found FROM students WHERE student_id=%s", (int(student_id),))
            return fetchone(cur) is not None

    def set_type(self, student_id: int, student_type: StudentType) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE students SET type=%s WHERE student_id=%s",
                (student_type.value, int(student_id)),
            )
            return cur.rowcount > 0

    def delete_by_id(self, student_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM students WHERE student_id=%s", (int(student_id),))
            return cur.rowcount > 0
