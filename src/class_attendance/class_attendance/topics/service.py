from __future__ import annotations

import logging
from datetime import date

from ..common.validators import require_non_empty
from ..core.exceptions import ValidationError
from .model import Topic
from .repository import TopicRepository

logger = logging.getLogger(__name__)


class TopicService:
    def __init__(self, topics: TopicRepository):
        self._topics = topics

    def add(self, *, class_date: date, title: str, description: str) -> Topic:
        if class_date is None:
            raise ValidationError("Data é obrigatória")
        topic = Topic(
            class_date=class_date,
            title=require_non_empty(title, "Título"),
            description=require_non_empty(description, "Descrição"),
        )
        self._topics.insert(topic)
        logger.info("Topic %r registered for %s", topic.title, class_date)
        return topic

    def list_recent(self) -> list[Topic]:
        # Stable sort keeps insertion order among topics of the same date.
        return sorted(self._topics.list_all(), key=lambda t: t.class_date, reverse=True)
