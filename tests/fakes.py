"""In-memory repositories satisfying the repository protocols."""

from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Optional

from src.class_attendance.class_attendance.attendance.model import AttendanceRecord
from src.class_attendance.class_attendance.core.enums import ClassDay, StudentType
from src.class_attendance.class_attendance.schedules.model import ScheduleEntry
from src.class_attendance.class_attendance.students.model import Student, StudentDraft
from src.class_attendance.class_attendance.topics.model import Topic
from src.class_attendance.class_attendance.volunteers.model import Volunteer


class InMemoryStudents:
    def __init__(self, students=()):
        self._by_id: dict[int, Student] = {s.student_id: s for s in students}
        self._id = max(self._by_id, default=0)
        self.on_delete = None

    def get_by_id(self, student_id: int) -> Optional[Student]:
        return self._by_id.get(int(student_id))

    def list_all(self):
        return sorted(self._by_id.values(), key=lambda s: s.name)

    def create(self, draft: StudentDraft, *, student_type: StudentType) -> int:
        self._id += 1
        self._by_id[self._id] = Student(
            student_id=self._id,
            name=draft.name,
            class_name=draft.class_name,
            age=draft.age,
            guardian_name=draft.guardian_name,
            phone=draft.phone,
            type=student_type,
        )
        return self._id

    def update(self, student_id: int, fields: dict) -> bool:
        current = self._by_id.get(int(student_id))
        if not current:
            return False
        self._by_id[current.student_id] = replace(current, **fields)
        return True

    def set_type(self, student_id: int, student_type: StudentType) -> bool:
        current = self._by_id.get(int(student_id))
        if not current or current.type == student_type:
            return False
        self._by_id[current.student_id] = replace(current, type=student_type)
        return True

    def delete_by_id(self, student_id: int) -> bool:
        removed = self._by_id.pop(int(student_id), None)
        if removed and self.on_delete:
            self.on_delete(removed.student_id)
        return removed is not None


class InMemoryAttendance:
    def __init__(self, records=()):
        self._by_key: dict[tuple[int, date], AttendanceRecord] = {
            (r.student_id, r.class_date): r for r in records
        }

    def get_for_student_and_date(self, student_id: int, class_date: date) -> Optional[AttendanceRecord]:
        return self._by_key.get((int(student_id), class_date))

    def list_for_student(self, student_id: int):
        items = [r for r in self._by_key.values() if r.student_id == int(student_id)]
        items.sort(key=lambda r: r.class_date, reverse=True)
        return items

    def list_all(self):
        return sorted(self._by_key.values(), key=lambda r: (r.class_date, r.student_id))

    def upsert_attendance(self, *, student_id: int, class_date: date, present: bool, day: Optional[ClassDay]) -> bool:
        key = (int(student_id), class_date)
        current = self._by_key.get(key)
        if present:
            if current:
                self._by_key[key] = replace(current, present=True, day=day)
            else:
                self._by_key[key] = AttendanceRecord(
                    student_id=int(student_id), class_date=class_date, present=True, dismissed_by=None, day=day
                )
            return True

        if not current:
            return False
        self._by_key[key] = replace(current, present=False, dismissed_by=None)
        return True

    def set_dismissal(self, *, student_id: int, class_date: date, responsible_name: str) -> bool:
        key = (int(student_id), class_date)
        current = self._by_key.get(key)
        if not current or not current.present:
            return False
        self._by_key[key] = replace(current, dismissed_by=responsible_name)
        return True

    def delete_for_student(self, student_id: int) -> None:
        for key in [k for k in self._by_key if k[0] == student_id]:
            del self._by_key[key]


class InMemoryVolunteers:
    def __init__(self, volunteers=()):
        self._items: list[Volunteer] = list(volunteers)

    def list_all(self):
        return sorted(self._items, key=lambda v: v.name)

    def create(self, *, name: str) -> int:
        new_id = max((v.volunteer_id for v in self._items), default=0) + 1
        self._items.append(Volunteer(volunteer_id=new_id, name=name))
        return new_id


class InMemorySchedules:
    def __init__(self, entries=()):
        self._by_key: dict[tuple[date, str], ScheduleEntry] = {(e.class_date, e.class_name): e for e in entries}

    def list_all(self):
        return sorted(self._by_key.values(), key=lambda e: (e.class_date, e.class_name))

    def list_for_date(self, class_date: date):
        return [e for e in self.list_all() if e.class_date == class_date]

    def get(self, *, class_date: date, class_name: str):
        return self._by_key.get((class_date, class_name))

    def upsert(self, entry: ScheduleEntry) -> None:
        self._by_key[(entry.class_date, entry.class_name)] = entry


class InMemoryTopics:
    def __init__(self, topics=()):
        self._items: list[Topic] = list(topics)

    def list_all(self):
        return sorted(self._items, key=lambda t: t.class_date, reverse=True)

    def insert(self, topic: Topic) -> None:
        self._items.append(topic)


def make_student(student_id: int, name: str, *, class_name: str = "Jardim", type=StudentType.MEMBER) -> Student:
    return Student(
        student_id=student_id,
        name=name,
        class_name=class_name,
        age=6,
        guardian_name=f"Mãe de {name}",
        phone=f"1199999{student_id:04d}",
        type=type,
    )
