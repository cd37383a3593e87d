from __future__ import annotations

from typing import Any, Dict, Iterable
from flask import request

from lumina.app.common.errors import abort_json, validation_error


def get_json() -> Dict[str, Any]:
    if not request.is_json:
        abort_json(400, "invalid_json", "Request must be application/json")
    data = request.get_json(silent=True)
    if data is None or not isinstance(data, dict):
        abort_json(400, "invalid_json", "Malformed JSON body")
    return data


def require_fields(data: Dict[str, Any], fields: Iterable[str]) -> None:
    missing = [f for f in fields if f not in data]
    if missing:
        validation_error("Missing required fields", missing=missing)


def require_str(data: Dict[str, Any], field: str) -> str:
    value = data.get(field)
    if not isinstance(value, str) or not value:
        validation_error(f"{field} must be a non-empty string", field=field)
    return value


def require_int(data: Dict[str, Any], field: str) -> int:
    value = data.get(field)
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, int):
        validation_error(f"{field} must be an integer", field=field)
    return value
