from __future__ import annotations

from typing import Any

from ..core.exceptions import ValidationError


def require_non_empty(value: str | None, field_name: str) -> str:
    if value is None or not str(value).strip():
        raise ValidationError(f"{field_name} é obrigatório")
    return str(value).strip()


def require_positive_int(value: Any, field_name: str) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} deve ser um número") from None
    if number <= 0:
        raise ValidationError(f"{field_name} deve ser maior que zero")
    return number


def require_choice(value: str | None, field_name: str, choices) -> str:
    value = require_non_empty(value, field_name)
    if value not in choices:
        raise ValidationError(f"{field_name} inválida: {value}")
    return value
