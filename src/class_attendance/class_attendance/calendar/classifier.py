from __future__ import annotations

import logging
from datetime import date, datetime

from ..core.constants import PRIMARY_WEEKDAY, SECONDARY_WEEKDAY
from ..core.enums import ClassDay
from ..core.exceptions import InvalidClassDay

logger = logging.getLogger(__name__)


def classify(on: date) -> ClassDay:
    """Map a calendar date to the class day it represents.

    Only the weekday matters: no holiday calendar, no timezone handling.
    """

    if isinstance(on, datetime):
        on = on.date()

    weekday = on.weekday()
    if weekday == PRIMARY_WEEKDAY:
        return ClassDay.PRIMARY
    if weekday == SECONDARY_WEEKDAY:
        return ClassDay.SECONDARY
    return ClassDay.NONE


def is_class_day(on: date) -> bool:
    return classify(on).is_class_day


def require_class_day(on: date) -> ClassDay:
    day = classify(on)
    if not day.is_class_day:
        logger.warning("Rejected mutation on non-class day %s", on.isoformat())
        raise InvalidClassDay("A presença só pode ser marcada em Domingos ou Quartas-feiras.")
    return day
