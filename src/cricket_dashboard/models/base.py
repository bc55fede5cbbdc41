"""Base model classes for the cricket stats database."""

from enum import Enum
from typing import Any, Type

from sqlalchemy import Column, DateTime, Integer, Enum as SQLEnum, func
from sqlalchemy.orm import declarative_base


def enum_column(enum_cls: Type[Enum], length: int = 20) -> SQLEnum:
    """Store a str enum by its value rather than its member name."""
    return SQLEnum(
        enum_cls,
        values_callable=lambda members: [m.value for m in members],
        native_enum=False,
        length=length,
    )


class Base:
    """Base class for all database models."""

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)

    def to_dict(self) -> dict[str, Any]:
        """Convert model instance to dictionary."""
        return {
            column.name: getattr(self, column.name)
            for column in self.__table__.columns
        }


class CreatedAtMixin:
    """Server-assigned creation timestamp."""

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)


# Create the declarative base
Base = declarative_base(cls=Base)
