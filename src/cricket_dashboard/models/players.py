"""Player model for cricket stats database."""

from enum import Enum

from sqlalchemy import Column, ForeignKey, Index, Integer, String
from sqlalchemy.orm import relationship

from .base import Base, CreatedAtMixin, enum_column


class PlayerRole(str, Enum):
    """Enumeration of player roles."""
    BATSMAN = "Batsman"
    BOWLER = "Bowler"
    ALL_ROUNDER = "All-rounder"
    WICKET_KEEPER = "Wicket-keeper"


class Player(CreatedAtMixin, Base):
    """Player model representing cricket players."""

    __tablename__ = "players"

    name = Column(String(100), nullable=False, index=True)
    team_id = Column(Integer, ForeignKey("teams.id"), nullable=False, index=True)
    role = Column(enum_column(PlayerRole), nullable=False, index=True)

    team = relationship("Team", viewonly=True)

    __table_args__ = (
        Index("idx_player_team_role", "team_id", "role"),
    )

    def __repr__(self) -> str:
        return f"<Player(name='{self.name}', role='{self.role}')>"
