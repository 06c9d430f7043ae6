from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, join_id_list, split_id_list
from .model import ScheduleEntry
from .repository import ScheduleRepository

_COLUMNS = "class_date, class_name, supervisor_id, coordinator_id, desk_id, minister_ids"


def _opt_int(value) -> Optional[int]:
    return int(value) if value is not None else None


def _to_entry(r: dict) -> ScheduleEntry:
    return ScheduleEntry(
        class_date=r["class_date"],
        class_name=r["class_name"],
        supervisor_id=_opt_int(r.get("supervisor_id")),
        coordinator_id=_opt_int(r.get("coordinator_id")),
        desk_id=_opt_int(r.get("desk_id")),
        minister_ids=split_id_list(r.get("minister_ids")),
    )


class MySQLScheduleRepository(ScheduleRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[ScheduleEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM schedule ORDER BY class_date, class_name")
            return [_to_entry(r) for r in fetchall(cur)]

    def list_for_date(self, class_date: date) -> Sequence[ScheduleEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM schedule WHERE class_date=%s ORDER BY class_name",
                (class_date,),
            )
            return [_to_entry(r) for r in fetchall(cur)]

    def get(self, *, class_date: date, class_name: str) -> Optional[ScheduleEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM schedule WHERE class_date=%s AND class_name=%s",
                (class_date, class_name),
            )
            r = fetchone(cur)
            return _to_entry(r) if r else None

    def upsert(self, entry: ScheduleEntry) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO schedule(class_date, class_name, supervisor_id, coordinator_id, desk_id, minister_ids)
                VALUES(%s,%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE
                    supervisor_id=VALUES(supervisor_id),
                    coordinator_id=VALUES(coordinator_id),
                    desk_id=VALUES(desk_id),
                    minister_ids=VALUES(minister_ids)
                """,
                (
                    entry.class_date,
                    entry.class_name,
                    entry.supervisor_id,
                    entry.coordinator_id,
                    entry.desk_id,
                    join_id_list(entry.minister_ids),
                ),
            )
