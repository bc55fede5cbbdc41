"""Pydantic schemas for the audit log."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from ..models.sql_logs import LogStatus, OperationType
from .base import CamelModel, FieldErrors, ResponseModel

VALID_STATUSES = ", ".join(s.value for s in LogStatus)
VALID_OPERATIONS = ", ".join(o.value for o in OperationType)


class SqlLogCreate(CamelModel):
    """Manually appended audit row; every field is optional."""

    error_codes = {
        "operationType": FieldErrors(
            "INVALID_OPERATION_TYPE", "INVALID_OPERATION_TYPE",
            f"Invalid operation type. Must be one of: {VALID_OPERATIONS}",
        ),
        "tableName": FieldErrors("INVALID_TABLE_NAME", "INVALID_TABLE_NAME", "tableName must be a string"),
        "sqlStatement": FieldErrors("INVALID_SQL_STATEMENT", "INVALID_SQL_STATEMENT", "sqlStatement must be a string"),
        "status": FieldErrors("INVALID_STATUS", "INVALID_STATUS", f"Invalid status. Must be one of: {VALID_STATUSES}"),
        "errorMessage": FieldErrors("INVALID_ERROR_MESSAGE", "INVALID_ERROR_MESSAGE", "errorMessage must be a string"),
        "executedAt": FieldErrors("INVALID_EXECUTED_AT", "INVALID_EXECUTED_AT", "executedAt must be an ISO timestamp"),
    }

    operation_type: Optional[OperationType] = None
    table_name: Optional[str] = Field(None, max_length=100)
    sql_statement: Optional[str] = None
    status: Optional[LogStatus] = None
    error_message: Optional[str] = None
    executed_at: Optional[datetime] = None


class SqlLogResponse(ResponseModel):
    id: int
    operation_type: Optional[OperationType]
    table_name: Optional[str]
    sql_statement: Optional[str]
    executed_at: datetime
    status: Optional[LogStatus]
    error_message: Optional[str]
