from __future__ import annotations

import logging

from ..common.validators import require_non_empty
from .model import Volunteer
from .repository import VolunteerRepository

logger = logging.getLogger(__name__)


class VolunteerService:
    def __init__(self, volunteers: VolunteerRepository):
        self._volunteers = volunteers

    def list_all(self) -> list[Volunteer]:
        return sorted(self._volunteers.list_all(), key=lambda v: v.name.casefold())

    def create(self, *, name: str) -> Volunteer:
        name = require_non_empty(name, "Nome")
        volunteer_id = self._volunteers.create(name=name)
        logger.info("Volunteer %s created (id=%s)", name, volunteer_id)
        return Volunteer(volunteer_id=volunteer_id, name=name)
