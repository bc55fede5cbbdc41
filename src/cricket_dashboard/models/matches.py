"""Match models: fixtures, participating teams, scores and results."""

from enum import Enum

from sqlalchemy import Column, Date, Float, ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import relationship

from .base import Base, CreatedAtMixin, enum_column


class MatchType(str, Enum):
    """Enumeration of cricket match types."""
    ODI = "ODI"
    TEST = "Test"
    T20 = "T20"
    T10 = "T10"


class Match(CreatedAtMixin, Base):
    """Match model representing a single fixture."""

    __tablename__ = "matches"

    venue = Column(String(200), nullable=False, index=True)
    match_date = Column(Date, nullable=False, index=True)
    match_type = Column(enum_column(MatchType), nullable=False, index=True)

    def __repr__(self) -> str:
        return f"<Match({self.match_type}, {self.venue}, {self.match_date})>"


class MatchTeam(Base):
    """One participating team of a match."""

    __tablename__ = "match_teams"

    match_id = Column(Integer, ForeignKey("matches.id"), nullable=False, index=True)
    team_id = Column(Integer, ForeignKey("teams.id"), nullable=False, index=True)

    match = relationship("Match", viewonly=True)
    team = relationship("Team", viewonly=True)

    __table_args__ = (
        UniqueConstraint("match_id", "team_id", name="uq_match_teams_match_team"),
    )


class MatchScore(Base):
    """Innings total of one match team."""

    __tablename__ = "match_scores"

    match_team_id = Column(Integer, ForeignKey("match_teams.id"), nullable=False, unique=True)
    runs = Column(Integer, nullable=False)
    wickets = Column(Integer, nullable=False)
    overs = Column(Float, nullable=False)

    match_team = relationship("MatchTeam", viewonly=True)


class MatchResult(CreatedAtMixin, Base):
    """Derived outcome of a match, at most one per match."""

    __tablename__ = "match_result"

    match_id = Column(Integer, ForeignKey("matches.id"), nullable=False, unique=True)
    winning_team_id = Column(Integer, ForeignKey("teams.id"), nullable=True, index=True)
    result_summary = Column(Text, nullable=True)

    winning_team = relationship("Team", viewonly=True)
