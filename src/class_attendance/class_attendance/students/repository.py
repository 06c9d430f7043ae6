from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import StudentType
from .model import Student, StudentDraft


class StudentRepository(Protocol):
    """Roster side of the record store.

    Services depend on this interface, never on a concrete database.
    """

    def get_by_id(self, student_id: int) -> Optional[Student]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Student]:
        """All students ordered by name."""

        raise NotImplementedError

    def create(self, draft: StudentDraft, *, student_type: StudentType) -> int:
        raise NotImplementedError

    def update(self, student_id: int, fields: dict) -> bool:
        """Apply a partial update; keys are Student attribute names."""

        raise NotImplementedError

    def set_type(self, student_id: int, student_type: StudentType) -> bool:
        raise NotImplementedError

    def delete_by_id(self, student_id: int) -> bool:
        """Delete the student and, by cascade, its attendance records."""

        raise NotImplementedError
