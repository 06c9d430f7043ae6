from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class ScheduleEntry:
    """Volunteer roster of one class group on one date.

    Unique per (class_date, class_name). minister_ids keeps insertion order.
    """

    class_date: date
    class_name: str
    supervisor_id: Optional[int] = None
    coordinator_id: Optional[int] = None
    desk_id: Optional[int] = None
    minister_ids: tuple[int, ...] = ()


@dataclass(frozen=True)
class ScheduleView:
    """ScheduleEntry with volunteer names resolved for display."""

    class_date: date
    class_name: str
    supervisor: str
    coordinator: str
    desk: str
    ministers: list[str]
