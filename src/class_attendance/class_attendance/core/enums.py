from __future__ import annotations

from enum import Enum


class StudentType(str, Enum):
    """Situação do aluno no rol da turma."""

    MEMBER = "Membro"
    VISITOR = "Visitante"


class ClassDay(str, Enum):
    """Classificação de uma data do calendário."""

    PRIMARY = "Sunday"
    SECONDARY = "Wednesday"
    NONE = "None"

    @property
    def is_class_day(self) -> bool:
        return self is not ClassDay.NONE


class DayFilter(str, Enum):
    """Filtro de tipo de dia usado nos relatórios mensais."""

    ALL = "All"
    PRIMARY = "Sunday"
    SECONDARY = "Wednesday"

    def matches(self, day: ClassDay) -> bool:
        if self is DayFilter.ALL:
            return True
        return self.value == day.value
