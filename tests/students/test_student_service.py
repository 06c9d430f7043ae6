from __future__ import annotations

import pytest

from src.class_attendance.class_attendance.core.enums import StudentType
from src.class_attendance.class_attendance.core.exceptions import NotFound, ValidationError
from src.class_attendance.class_attendance.students.service import StudentService
from tests.fakes import InMemoryStudents

FORM = {"name": "Lia", "class_name": "Jardim", "age": "5", "guardian_name": "Rosa", "phone": "11911112222"}


@pytest.fixture
def service():
    return StudentService(InMemoryStudents(), class_names=("Jardim", "Primários"))


def test_create_member_validates_and_coerces(service):
    student = service.create_member(**FORM)

    assert student.student_id == 1
    assert student.age == 5
    assert student.type == StudentType.MEMBER


@pytest.mark.parametrize("field", ["name", "class_name", "age", "guardian_name", "phone"])
def test_missing_field_is_rejected(service, field):
    with pytest.raises(ValidationError, match="obrigatórios"):
        service.create_member(**{**FORM, field: " "})


def test_unknown_class_and_bad_age(service):
    with pytest.raises(ValidationError):
        service.create_member(**{**FORM, "class_name": "Coral"})
    with pytest.raises(ValidationError):
        service.create_member(**{**FORM, "age": "-1"})


def test_visitor_promotion_keeps_identity(service):
    visitor = service.create_visitor(**FORM)

    member = service.make_member(visitor.student_id)

    assert member.student_id == visitor.student_id
    assert member.type == StudentType.MEMBER
    assert service.get(visitor.student_id).type == StudentType.MEMBER
    # promoting twice is harmless
    assert service.make_member(visitor.student_id).type == StudentType.MEMBER


def test_member_cannot_be_demoted(service):
    member = service.create_member(**FORM)

    with pytest.raises(ValidationError):
        service.update_student(member.student_id, type="Visitante")


def test_partial_update(service):
    student = service.create_member(**FORM)

    updated = service.update_student(student.student_id, phone="11900000000", name=None)

    assert updated.phone == "11900000000"
    assert updated.name == "Lia"
    assert service.get(student.student_id).phone == "11900000000"


def test_update_via_type_field_promotes(service):
    visitor = service.create_visitor(**FORM)

    updated = service.update_student(visitor.student_id, type="Membro")

    assert updated.type == StudentType.MEMBER


def test_delete_and_missing(service):
    student = service.create_member(**FORM)
    service.delete_student(student.student_id)

    with pytest.raises(NotFound):
        service.get(student.student_id)
    with pytest.raises(NotFound):
        service.delete_student(student.student_id)


def test_search_by_name_phone_class_and_type(service):
    service.create_member(**FORM)
    service.create_visitor(**{**FORM, "name": "bruno", "phone": "11733334444", "class_name": "Primários"})
    service.create_member(**{**FORM, "name": "Alice", "phone": "11755556666"})

    assert [s.name for s in service.search()] == ["Alice", "bruno", "Lia"]
    assert [s.name for s in service.search("LI")] == ["Alice", "Lia"]
    assert [s.name for s in service.search("3333")] == ["bruno"]
    assert [s.name for s in service.search(class_name="Jardim")] == ["Alice", "Lia"]
    assert [s.name for s in service.search(student_type=StudentType.VISITOR)] == ["bruno"]


def test_partial_update_keeps_class_removed_from_configuration():
    students = InMemoryStudents()
    StudentService(students, class_names=("Jardim", "Berçário")).create_member(**{**FORM, "class_name": "Berçário"})
    service = StudentService(students, class_names=("Jardim", "Primários"))

    updated = service.update_student(1, phone="11900000000")
    assert (updated.class_name, updated.phone) == ("Berçário", "11900000000")

    with pytest.raises(ValidationError):
        service.update_student(1, class_name="Berçário")
