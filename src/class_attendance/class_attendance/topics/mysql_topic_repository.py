from __future__ import annotations

from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import Topic
from .repository import TopicRepository


class MySQLTopicRepository(TopicRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Topic]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT class_date, title, description FROM topics ORDER BY class_date DESC, topic_id DESC")
            return [Topic(class_date=r["class_date"], title=r["title"], description=r["description"]) for r in fetchall(cur)]

    def insert(self, topic: Topic) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO topics(class_date, title, description) VALUES(%s,%s,%s)",
                (topic.class_date, topic.title, topic.description),
            )
