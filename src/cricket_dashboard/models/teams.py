"""Team model for cricket stats database."""

from sqlalchemy import Column, String

from .base import Base, CreatedAtMixin


class Team(CreatedAtMixin, Base):
    """Team model representing cricket teams."""

    __tablename__ = "teams"

    name = Column(String(100), nullable=False, unique=True, index=True)
    country = Column(String(100), nullable=False, index=True)

    def __repr__(self) -> str:
        return f"<Team(name='{self.name}', country='{self.country}')>"
