"""Audit trail of write statements issued through the API."""

from enum import Enum

from sqlalchemy import Column, DateTime, String, Text, func

from .base import Base, enum_column


class LogStatus(str, Enum):
    """Execution status of a logged statement."""
    SUCCESS = "success"
    ERROR = "error"
    PENDING = "pending"


class OperationType(str, Enum):
    """Kind of logged operation."""
    SELECT = "SELECT"
    INSERT = "INSERT"
    UPDATE = "UPDATE"
    DELETE = "DELETE"
    PROCEDURE = "PROCEDURE"
    FUNCTION = "FUNCTION"
    TRIGGER = "TRIGGER"


class SqlLog(Base):
    """Append-only audit row."""

    __tablename__ = "sql_logs"

    operation_type = Column(enum_column(OperationType), nullable=True, index=True)
    table_name = Column(String(100), nullable=True, index=True)
    sql_statement = Column(Text, nullable=True)
    executed_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False, index=True)
    status = Column(enum_column(LogStatus), nullable=True, index=True)
    error_message = Column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<SqlLog({self.operation_type}, {self.table_name}, {self.status})>"
