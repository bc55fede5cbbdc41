"""Audit trail of write operations, recorded in the same transaction as the write.

Successful writes append a ``success`` row to ``sql_logs`` before the session
commits, so the log and the change are persisted together. A failed write is
rolled back and its ``error`` row is written in a separate transaction.
"""

import logging
from contextlib import contextmanager
from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Any, Generator, Mapping, Optional

from sqlalchemy.orm import Session

from ..database import get_session
from ..errors import ApiError
from ..models import LogStatus, OperationType, SqlLog

logger = logging.getLogger(__name__)


@dataclass
class AuditTrail:
    """Session plus the statement text that will be logged for it."""

    operation_type: OperationType
    table_name: str
    statement: Optional[str] = None
    session: Optional[Session] = field(default=None, repr=False)

    def to_log(self, status: LogStatus, error_message: Optional[str] = None) -> SqlLog:
        return SqlLog(
            operation_type=self.operation_type,
            table_name=self.table_name,
            sql_statement=self.statement,
            status=status,
            error_message=error_message,
        )


def sql_literal(value: Any) -> str:
    """Render a Python value as a SQL literal for display purposes."""
    if value is None:
        return "NULL"
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, (date, datetime)):
        value = value.isoformat()
    text = str(value).replace("'", "''")
    return f"'{text}'"


def render_insert(table: str, values: Mapping[str, Any]) -> str:
    columns = ", ".join(values.keys())
    literals = ", ".join(sql_literal(v) for v in values.values())
    return f"INSERT INTO {table} ({columns}) VALUES ({literals});"


def render_update(table: str, values: Mapping[str, Any], row_id: int) -> str:
    assignments = ", ".join(f"{k} = {sql_literal(v)}" for k, v in values.items())
    return f"UPDATE {table} SET {assignments} WHERE id = {row_id};"


def render_delete(table: str, row_id: int) -> str:
    return f"DELETE FROM {table} WHERE id = {row_id};"


def render_call(name: str, *args: Any) -> str:
    return f"CALL {name}({', '.join(sql_literal(a) for a in args)});"


def _failure_message(exc: BaseException) -> str:
    if isinstance(exc, ApiError):
        return exc.message
    return f"{type(exc).__name__}: {exc}"


def record_failure(trail: AuditTrail, exc: BaseException) -> None:
    """Persist an ``error`` row for a write whose transaction was rolled back."""
    try:
        with get_session() as session:
            session.add(trail.to_log(LogStatus.ERROR, _failure_message(exc)))
    except Exception as log_exc:
        logger.error(f"Failed to record audit failure for {trail.table_name}: {log_exc}")


@contextmanager
def audited(
    operation_type: OperationType,
    table_name: str,
    statement: Optional[str] = None,
    enabled: bool = True,
) -> Generator[AuditTrail, None, None]:
    """Open a write transaction whose outcome is appended to ``sql_logs``.

    The statement may be filled in on the yielded trail when it is only known
    once the transaction has read what it needs.
    """
    trail = AuditTrail(operation_type, table_name, statement)
    try:
        with get_session() as session:
            trail.session = session
            yield trail
            if enabled:
                session.add(trail.to_log(LogStatus.SUCCESS))
    except Exception as exc:
        if enabled:
            record_failure(trail, exc)
        logger.info(f"{operation_type.value} on {table_name} failed: {_failure_message(exc)}")
        raise
