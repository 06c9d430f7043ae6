from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Volunteer:
    volunteer_id: int
    name: str
