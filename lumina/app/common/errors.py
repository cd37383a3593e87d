from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, NoReturn


@dataclass
class ApiError(Exception):
    """Raised at the HTTP boundary; rendered as ``{"error": {...}}`` by the app."""

    status_code: int
    code: str
    message: str
    details: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self, request_id: str | None = None) -> Dict[str, Any]:
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "details": self.details,
                "request_id": request_id,
            }
        }


def abort_json(status_code: int, code: str, message: str, details: Dict[str, Any] | None = None) -> NoReturn:
    raise ApiError(status_code=status_code, code=code, message=message, details=details or {})


def validation_error(message: str, **details: Any) -> NoReturn:
    abort_json(400, "validation_error", message, details)


def not_found(message: str, **details: Any) -> NoReturn:
    abort_json(404, "not_found", message, details)
