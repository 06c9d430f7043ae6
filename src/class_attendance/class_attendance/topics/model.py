from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class Topic:
    """Lesson note. Append-only, no identity beyond insertion."""

    class_date: date
    title: str
    description: str
