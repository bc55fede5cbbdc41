"""Per-match player performance model."""

from sqlalchemy import Column, ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import relationship

from .base import Base


class Performance(Base):
    """Batting and bowling figures of one player in one match."""

    __tablename__ = "performance"

    match_id = Column(Integer, ForeignKey("matches.id"), nullable=False, index=True)
    player_id = Column(Integer, ForeignKey("players.id"), nullable=False, index=True)
    runs_scored = Column(Integer, nullable=False, default=0)
    wickets_taken = Column(Integer, nullable=False, default=0)

    match = relationship("Match", viewonly=True)
    player = relationship("Player", viewonly=True)

    # One record per player per match
    __table_args__ = (
        UniqueConstraint("match_id", "player_id", name="uq_performance_match_player"),
    )
