"""JSON shapes exposed by the HTTP API (camelCase keys, ISO dates)."""

from __future__ import annotations

from typing import Optional

from ..attendance.model import AttendanceRecord
from ..reports.model import DailySnapshot, MonthlyReport, StudentHistory
from ..schedules.model import ScheduleEntry, ScheduleView
from ..students.model import Student
from ..topics.model import Topic
from ..volunteers.model import Volunteer


def attendance_json(r: Optional[AttendanceRecord]) -> Optional[dict]:
    if r is None:
        return None
    return {
        "studentId": r.student_id,
        "date": r.class_date.isoformat(),
        "present": r.present,
        "dismissedBy": r.dismissed_by,
        "day": r.effective_day.value,
    }


def student_json(s: Student, attendance=None) -> dict:
    out = {
        "id": s.student_id,
        "name": s.name,
        "class": s.class_name,
        "age": s.age,
        "guardianName": s.guardian_name,
        "phone": s.phone,
        "type": s.type.value,
    }
    if attendance is not None:
        out["attendance"] = [attendance_json(r) for r in attendance]
    return out


def volunteer_json(v: Volunteer) -> dict:
    return {"id": v.volunteer_id, "name": v.name}


def schedule_json(e: ScheduleEntry) -> dict:
    return {
        "date": e.class_date.isoformat(),
        "className": e.class_name,
        "supervisorId": e.supervisor_id,
        "coordinatorId": e.coordinator_id,
        "deskId": e.desk_id,
        "ministerIds": list(e.minister_ids),
    }


def schedule_view_json(v: ScheduleView) -> dict:
    return {
        "date": v.class_date.isoformat(),
        "className": v.class_name,
        "supervisor": v.supervisor,
        "coordinator": v.coordinator,
        "desk": v.desk,
        "ministers": list(v.ministers),
    }


def topic_json(t: Topic) -> dict:
    return {"date": t.class_date.isoformat(), "title": t.title, "description": t.description}


def snapshot_json(s: DailySnapshot) -> dict:
    return {
        "date": s.class_date.isoformat(),
        "class": s.class_name,
        "day": s.day.value,
        "totalPresent": s.total_present,
        "membersPresent": s.members_present,
        "visitorsPresent": s.visitors_present,
        "totalAbsent": len(s.absent),
        "present": [{**student_json(x), "dismissedBy": s.dismissed_by.get(x.student_id)} for x in s.present],
        "absent": [student_json(x) for x in s.absent],
        "perClass": s.per_class,
    }


def monthly_report_json(r: MonthlyReport) -> dict:
    return {
        "year": r.year,
        "month": r.month,
        "class": r.class_name,
        "day": r.day_filter.value,
        "totalPresences": r.total_presences,
        "serviceDays": [d.isoformat() for d in r.service_days],
        "serviceDayCount": r.service_day_count,
        "uniqueAttendees": r.unique_attendees,
        "averageAttendance": round(r.average_attendance, 2),
        "rows": [
            {
                "studentId": row.student_id,
                "name": row.name,
                "class": row.class_name,
                "type": row.type.value,
                "presences": row.presences,
            }
            for row in r.rows
        ],
    }


def history_json(h: StudentHistory) -> dict:
    return {
        "student": student_json(h.student),
        "start": h.start.isoformat(),
        "end": h.end.isoformat(),
        "rows": [
            {
                "date": row.class_date.isoformat(),
                "present": row.present,
                "dismissedBy": row.dismissed_by,
                "day": row.day.value,
            }
            for row in h.rows
        ],
        "tallies": {
            day.value: {
                "totalDays": t.total_days,
                "presentCount": t.present_count,
                "absentCount": t.absent_count,
                "dismissedCount": t.dismissed_count,
            }
            for day, t in h.tallies.items()
        },
    }
