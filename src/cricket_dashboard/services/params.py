"""Parsing of query-string parameters: ids, pagination and list filters."""

from enum import Enum
from typing import Any, Callable, Mapping, NamedTuple, Optional, Type

from ..errors import bad_request
from ..schemas.base import MAX_DB_INT


class Page(NamedTuple):
    limit: int
    offset: int


def _as_int(raw: Any) -> Optional[int]:
    if raw is None:
        return None
    try:
        value = int(str(raw).strip())
    except ValueError:
        return None
    # Out-of-range values cannot match any stored row
    if not -MAX_DB_INT - 1 <= value <= MAX_DB_INT:
        return None
    return value


def present(raw: Optional[str]) -> bool:
    """Empty query values count as absent."""
    return raw is not None and str(raw).strip() != ""


def parse_id(raw: Optional[str], code: str = "INVALID_ID", message: str = "Valid ID is required") -> int:
    value = _as_int(raw)
    if value is None:
        raise bad_request(message, code)
    return value


def parse_positive_id(raw: Optional[str], code: str, message: str) -> int:
    value = _as_int(raw)
    if value is None or value < 1:
        raise bad_request(message, code)
    return value


def parse_page(
    params: Mapping[str, str],
    default_limit: int,
    max_limit: int,
    positive_limit: bool = False,
) -> Page:
    """Read ``limit``/``offset``; limit is clamped to ``[1, max_limit]``.

    With ``positive_limit`` a limit below one is rejected instead of clamped.
    """
    limit = default_limit
    raw_limit = params.get("limit")
    if present(raw_limit):
        value = _as_int(raw_limit)
        if value is None:
            raise bad_request("Invalid limit parameter. Must be an integer.", "INVALID_LIMIT")
        if positive_limit and value < 1:
            raise bad_request("Invalid limit parameter. Must be a positive integer.", "INVALID_LIMIT")
        limit = value
    limit = max(1, min(limit, max_limit))

    offset = 0
    raw_offset = params.get("offset")
    if present(raw_offset):
        value = _as_int(raw_offset)
        if value is None or value < 0:
            raise bad_request("Invalid offset parameter. Must be a non-negative integer.", "INVALID_OFFSET")
        offset = value
    return Page(limit, offset)


def int_filter(code: str, message: str) -> Callable[[str], int]:
    def parse(raw: str) -> int:
        return parse_id(raw, code, message)
    return parse


def enum_filter(enum_cls: Type[Enum], code: str, label: str) -> Callable[[str], Enum]:
    valid = ", ".join(str(member.value) for member in enum_cls)

    def parse(raw: str) -> Enum:
        try:
            return enum_cls(raw.strip())
        except ValueError:
            raise bad_request(f"Invalid {label}. Must be one of: {valid}", code)
    return parse


def text_filter(raw: str) -> str:
    return raw.strip()
