from __future__ import annotations

from typing import Protocol, Sequence

from .model import Volunteer


class VolunteerRepository(Protocol):
    def list_all(self) -> Sequence[Volunteer]:
        """All volunteers ordered by name."""

        raise NotImplementedError

    def create(self, *, name: str) -> int:
        raise NotImplementedError
