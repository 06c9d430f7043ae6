from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import StudentType


@dataclass(frozen=True)
class Student:
    """Domain entity: a student enrolled in a class group.

    Plain data object; presence lives in the attendance ledger.
    """

    student_id: int
    name: str
    class_name: str
    age: int
    guardian_name: str
    phone: str
    type: StudentType = StudentType.MEMBER

    @property
    def is_visitor(self) -> bool:
        return self.type == StudentType.VISITOR


@dataclass(frozen=True)
class StudentDraft:
    """Validated roster fields, before an id is assigned."""

    name: str
    class_name: str
    age: int
    guardian_name: str
    phone: str
