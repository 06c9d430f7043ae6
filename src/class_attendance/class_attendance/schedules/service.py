from __future__ import annotations

import logging
from datetime import date
from typing import Iterable, Optional, Sequence

from ..common.validators import require_choice
from ..core.constants import ALL_CLASSES, DEFAULT_CLASS_NAMES
from ..core.exceptions import ValidationError
from ..volunteers.repository import VolunteerRepository
from .model import ScheduleEntry, ScheduleView
from .repository import ScheduleRepository

logger = logging.getLogger(__name__)

EMPTY_SLOT = "N/A"
UNKNOWN_VOLUNTEER = "?"


class ScheduleService:
    def __init__(
        self,
        schedules: ScheduleRepository,
        volunteers: VolunteerRepository,
        *,
        class_names: Sequence[str] = DEFAULT_CLASS_NAMES,
    ):
        self._schedules = schedules
        self._volunteers = volunteers
        self._class_names = tuple(class_names)

    def entries_for(self, on: date, class_name: str = ALL_CLASSES) -> list[ScheduleView]:
        names = {v.volunteer_id: v.name for v in self._volunteers.list_all()}

        def name_of(volunteer_id: Optional[int]) -> str:
            if volunteer_id is None:
                return EMPTY_SLOT
            return names.get(volunteer_id, UNKNOWN_VOLUNTEER)

        out = []
        for e in self._schedules.list_for_date(on):
            if class_name and class_name != ALL_CLASSES and e.class_name != class_name:
                continue
            out.append(
                ScheduleView(
                    class_date=e.class_date,
                    class_name=e.class_name,
                    supervisor=name_of(e.supervisor_id),
                    coordinator=name_of(e.coordinator_id),
                    desk=name_of(e.desk_id),
                    ministers=[name_of(i) for i in e.minister_ids],
                )
            )
        return out

    def assign(
        self,
        *,
        class_date: date,
        class_name: str,
        supervisor_id: Optional[int] = None,
        coordinator_id: Optional[int] = None,
        desk_id: Optional[int] = None,
        minister_ids: Iterable[int] = (),
    ) -> ScheduleEntry:
        class_name = require_choice(class_name, "Turma", self._class_names)

        def as_id(value) -> Optional[int]:
            if value in (None, ""):
                return None
            try:
                return int(value)
            except (TypeError, ValueError):
                raise ValidationError(f"Voluntário inválido: {value!r}") from None

        ministers: list[int] = []
        for raw in minister_ids or ():
            mid = as_id(raw)
            if mid is not None and mid not in ministers:
                ministers.append(mid)

        entry = ScheduleEntry(
            class_date=class_date,
            class_name=class_name,
            supervisor_id=as_id(supervisor_id),
            coordinator_id=as_id(coordinator_id),
            desk_id=as_id(desk_id),
            minister_ids=tuple(ministers),
        )

        known = {v.volunteer_id for v in self._volunteers.list_all()}
        referenced = [entry.supervisor_id, entry.coordinator_id, entry.desk_id, *entry.minister_ids]
        missing = sorted({i for i in referenced if i is not None and i not in known})
        if missing:
            raise ValidationError(f"Voluntário não encontrado: {', '.join(map(str, missing))}")

        self._schedules.upsert(entry)
        logger.info("Schedule saved for %s / %s", class_date, class_name)
        return entry
