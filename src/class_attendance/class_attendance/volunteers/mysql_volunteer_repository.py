from __future__ import annotations

from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import Volunteer
from .repository import VolunteerRepository


class MySQLVolunteerRepository(VolunteerRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Volunteer]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT volunteer_id, name FROM volunteers ORDER BY name")
            return [Volunteer(volunteer_id=int(r["volunteer_id"]), name=r["name"]) for r in fetchall(cur)]

    def create(self, *, name: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("INSERT INTO volunteers(name) VALUES(%s)", (name,))
            return int(cur.lastrowid)
