from __future__ import annotations

import logging
from datetime import date
from typing import Any, Optional

from flask import jsonify, request

from ..core.exceptions import (
    DomainError,
    InvalidClassDay,
    NotFound,
    StoreUnavailable,
    ValidationError,
)
from .datetime_utils import parse_iso_date, today_local

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR = (
    (InvalidClassDay, 422),
    (ValidationError, 400),
    (NotFound, 404),
    (StoreUnavailable, 503),
)


def ok(payload: Optional[dict] = None, status: int = 200):
    body = {"success": True}
    body.update(payload or {})
    return jsonify(body), status


def fail(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def domain_error_response(e: DomainError):
    for error_type, status in _STATUS_BY_ERROR:
        if isinstance(e, error_type):
            return fail(str(e), status)
    return fail(str(e), 400)


def unexpected_error_response(action: str):
    logger.exception("Unexpected error while %s", action)
    return fail("Erro interno do sistema", 500)


def json_body() -> dict:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("Corpo da requisição deve ser um objeto JSON")
    return data


def date_field(data: dict, key: str = "date") -> date:
    value = data.get(key)
    if not value:
        raise ValidationError("Data é obrigatória")
    return parse_iso_date(value)


def date_arg(key: str = "date", default: Optional[date] = None) -> date:
    value = request.args.get(key)
    if not value:
        return default or today_local()
    return parse_iso_date(value)


def int_field(data: dict, key: str, label: str) -> int:
    try:
        return int(data.get(key))
    except (TypeError, ValueError):
        raise ValidationError(f"{label} inválido") from None


def bool_field(data: dict, key: str) -> bool:
    value: Any = data.get(key)
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return bool(value)
    if isinstance(value, str) and value.strip().lower() in {"true", "1", "yes", "sim"}:
        return True
    if isinstance(value, str) and value.strip().lower() in {"false", "0", "no", "nao", "não"}:
        return False
    raise ValidationError(f"Campo {key} deve ser verdadeiro ou falso")
