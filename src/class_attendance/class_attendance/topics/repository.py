from __future__ import annotations

from typing import Protocol, Sequence

from .model import Topic


class TopicRepository(Protocol):
    def list_all(self) -> Sequence[Topic]:
        """All topics, newest class date first."""

        raise NotImplementedError

    def insert(self, topic: Topic) -> None:
        raise NotImplementedError
