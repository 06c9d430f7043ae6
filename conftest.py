from __future__ import annotations

from datetime import date

import pytest

from src.class_attendance.class_attendance.container import wire
from tests.fakes import (
    InMemoryAttendance,
    InMemorySchedules,
    InMemoryStudents,
    InMemoryTopics,
    InMemoryVolunteers,
)

CLASS_NAMES = ("Maternal", "Jardim", "Primários")


@pytest.fixture
def sunday() -> date:
    return date(2026, 1, 4)


@pytest.fixture
def wednesday() -> date:
    return date(2026, 1, 7)


@pytest.fixture
def tuesday() -> date:
    return date(2026, 1, 6)


@pytest.fixture
def repos():
    students = InMemoryStudents()
    attendance = InMemoryAttendance()
    # Mirrors ON DELETE CASCADE.
    students.on_delete = attendance.delete_for_student
    return {
        "students_repo": students,
        "attendance_repo": attendance,
        "volunteers_repo": InMemoryVolunteers(),
        "schedules_repo": InMemorySchedules(),
        "topics_repo": InMemoryTopics(),
    }


@pytest.fixture
def container(repos):
    return wire(class_names=CLASS_NAMES, **repos)


@pytest.fixture
def app(container, monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    from src.class_attendance.class_attendance.main import create_app

    return create_app(container)


@pytest.fixture
def client(app):
    return app.test_client()
