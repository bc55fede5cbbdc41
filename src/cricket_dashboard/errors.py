"""Domain exceptions and integrity-error classification."""

from typing import Any, Dict, Optional

from sqlalchemy.exc import IntegrityError


class ApiError(Exception):
    """Error surfaced to API clients with an HTTP status and a machine code."""

    def __init__(self, status_code: int, message: str, code: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.code = code

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"error": self.message}
        if self.code:
            payload["code"] = self.code
        return payload

    def __repr__(self) -> str:
        return f"ApiError({self.status_code}, {self.message!r}, code={self.code!r})"


def bad_request(message: str, code: str) -> ApiError:
    return ApiError(400, message, code)


def not_found(label: str, code: Optional[str] = None) -> ApiError:
    return ApiError(404, f"{label} not found", code)


# Fragments of the driver messages for SQLite and MySQL
_UNIQUE_MARKERS = ("unique constraint failed", "duplicate entry")
_FOREIGN_KEY_MARKERS = ("foreign key constraint", "a foreign key constraint fails")


def classify_integrity_error(exc: IntegrityError) -> str:
    """Return ``unique``, ``foreign_key`` or ``other`` for a driver integrity error."""
    message = str(exc.orig if exc.orig is not None else exc).lower()
    if any(marker in message for marker in _UNIQUE_MARKERS):
        return "unique"
    if any(marker in message for marker in _FOREIGN_KEY_MARKERS):
        return "foreign_key"
    return "other"


def foreign_key_error(action: str, label: str) -> ApiError:
    if action == "delete":
        message = f"Cannot delete {label.lower()}: it is referenced by other records"
    else:
        message = f"{label} references a record that does not exist"
    return ApiError(400, message, "FOREIGN_KEY_CONSTRAINT")
