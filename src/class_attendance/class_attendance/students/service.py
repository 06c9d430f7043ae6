from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..common.validators import require_choice, require_non_empty, require_positive_int
from ..core.constants import ALL_CLASSES, DEFAULT_CLASS_NAMES
from ..core.enums import StudentType
from ..core.exceptions import NotFound, ValidationError
from .model import Student, StudentDraft
from .repository import StudentRepository

logger = logging.getLogger(__name__)

_REQUIRED_MESSAGE = "Todos os campos são obrigatórios."


class StudentService:
    """Use case: manage the class roster (members and visitors)."""

    def __init__(self, students: StudentRepository, *, class_names: Sequence[str] = DEFAULT_CLASS_NAMES):
        self._students = students
        self._class_names = tuple(class_names)

    @property
    def class_names(self) -> tuple[str, ...]:
        return self._class_names

    def _validate(self, *, name, class_name, age, guardian_name, phone, check_class: bool = True) -> StudentDraft:
        if any(v is None or str(v).strip() == "" for v in (name, class_name, age, guardian_name, phone)):
            raise ValidationError(_REQUIRED_MESSAGE)

        return StudentDraft(
            name=require_non_empty(name, "Nome"),
            class_name=require_choice(class_name, "Turma", self._class_names) if check_class else str(class_name).strip(),
            age=require_positive_int(age, "Idade"),
            guardian_name=require_non_empty(guardian_name, "Nome do responsável"),
            phone=require_non_empty(phone, "Telefone"),
        )

    def get(self, student_id: int) -> Student:
        student = self._students.get_by_id(int(student_id))
        if not student:
            raise NotFound("Aluno não encontrado")
        return student

    def list_all(self) -> Sequence[Student]:
        return self._students.list_all()

    def create_member(self, *, name, class_name, age, guardian_name, phone) -> Student:
        draft = self._validate(name=name, class_name=class_name, age=age, guardian_name=guardian_name, phone=phone)
        return self._create(draft, StudentType.MEMBER)

    def create_visitor(self, *, name, class_name, age, guardian_name, phone) -> Student:
        """Register a visitor. Marking presence is a separate ledger call."""

        draft = self._validate(name=name, class_name=class_name, age=age, guardian_name=guardian_name, phone=phone)
        return self._create(draft, StudentType.VISITOR)

    def _create(self, draft: StudentDraft, student_type: StudentType) -> Student:
        student_id = self._students.create(draft, student_type=student_type)
        logger.info("Created %s %s (id=%s) in %s", student_type.value, draft.name, student_id, draft.class_name)
        return Student(
            student_id=student_id,
            name=draft.name,
            class_name=draft.class_name,
            age=draft.age,
            guardian_name=draft.guardian_name,
            phone=draft.phone,
            type=student_type,
        )

    def update_student(self, student_id: int, **fields) -> Student:
        current = self.get(student_id)

        if "type" in fields and fields["type"] is not None:
            try:
                requested = StudentType(fields.pop("type"))
            except ValueError:
                raise ValidationError("Tipo de aluno inválido") from None
            if requested == StudentType.VISITOR and current.type == StudentType.MEMBER:
                raise ValidationError("Um membro não pode voltar a ser visitante")
            if requested == StudentType.MEMBER:
                current = self.make_member(student_id)
        fields.pop("type", None)

        merged = {
            "name": current.name,
            "class_name": current.class_name,
            "age": current.age,
            "guardian_name": current.guardian_name,
            "phone": current.phone,
        }
        changes = {k: v for k, v in fields.items() if k in merged and v is not None}
        if not changes:
            return current

        merged.update(changes)
        # A class dropped from configuration stays valid until it is changed.
        draft = self._validate(**merged, check_class="class_name" in changes)
        values = {k: getattr(draft, k) for k in changes}
        if not self._students.update(int(student_id), values):
            raise NotFound("Aluno não encontrado")

        logger.info("Updated student %s fields=%s", student_id, sorted(values))
        return Student(student_id=current.student_id, type=current.type, **{k: getattr(draft, k) for k in merged})

    def make_member(self, student_id: int) -> Student:
        """Promote a visitor to member, keeping id and attendance history."""

        student = self.get(student_id)
        if student.type == StudentType.MEMBER:
            return student

        if not self._students.set_type(student.student_id, StudentType.MEMBER):
            raise NotFound("Aluno não encontrado")
        logger.info("Student %s (%s) promoted to member", student.student_id, student.name)
        return Student(
            student_id=student.student_id,
            name=student.name,
            class_name=student.class_name,
            age=student.age,
            guardian_name=student.guardian_name,
            phone=student.phone,
            type=StudentType.MEMBER,
        )

    def delete_student(self, student_id: int) -> None:
        student = self.get(student_id)
        if not self._students.delete_by_id(student.student_id):
            raise NotFound("Aluno não encontrado")
        logger.info("Deleted student %s (%s)", student.student_id, student.name)

    def search(
        self,
        term: str = "",
        *,
        class_name: str = ALL_CLASSES,
        student_type: Optional[StudentType] = None,
    ) -> list[Student]:
        """Name (case-insensitive) or phone substring search, sorted by name."""

        needle = (term or "").strip()
        lowered = needle.casefold()
        out = []
        for s in self._students.list_all():
            if class_name and class_name != ALL_CLASSES and s.class_name != class_name:
                continue
            if student_type is not None and s.type != student_type:
                continue
            if needle and lowered not in s.name.casefold() and needle not in s.phone:
                continue
            out.append(s)
        out.sort(key=lambda s: s.name.casefold())
        return out
