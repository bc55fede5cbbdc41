"""Award models."""

from enum import Enum

from sqlalchemy import Column, ForeignKey, Index, Integer, String
from sqlalchemy.orm import relationship

from .base import Base, enum_column


class AwardCategory(str, Enum):
    """Enumeration of award categories."""
    PERFORMANCE = "Performance"
    SEASON = "Season"
    LEADERSHIP = "Leadership"
    CONDUCT = "Conduct"


class Award(Base):
    """Award definition."""

    __tablename__ = "awards"

    award_name = Column(String(200), nullable=False, index=True)
    award_category = Column(enum_column(AwardCategory), nullable=False, index=True)


class PlayerAward(Base):
    """An award given to a player in a given year."""

    __tablename__ = "player_awards"

    player_id = Column(Integer, ForeignKey("players.id"), nullable=False, index=True)
    award_id = Column(Integer, ForeignKey("awards.id"), nullable=False, index=True)
    year = Column(Integer, nullable=False, index=True)

    player = relationship("Player", viewonly=True)
    award = relationship("Award", viewonly=True)

    __table_args__ = (
        Index("idx_player_award_year", "player_id", "year"),
    )
