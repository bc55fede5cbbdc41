"""Sample data set: six international sides, ten fixtures and their figures.

Rows that reference other tables use 1-based positions in those tables,
resolved against the rows ordered by id when the seed runs.
"""

from datetime import date
from typing import Dict, List, Sequence

from loguru import logger
from sqlalchemy import func, select
from sqlalchemy.orm import Session

from .database import get_session
from .models import (
    Award,
    AwardCategory,
    Match,
    MatchScore,
    MatchTeam,
    MatchType,
    Performance,
    Player,
    PlayerAward,
    PlayerRole,
    Team,
)

TEAMS = ["India", "Australia", "England", "Pakistan", "South Africa", "New Zealand"]

# (name, team position, role)
PLAYERS = [
    ("Virat Kohli", 1, PlayerRole.BATSMAN),
    ("Jasprit Bumrah", 1, PlayerRole.BOWLER),
    ("Ravindra Jadeja", 1, PlayerRole.ALL_ROUNDER),
    ("KL Rahul", 1, PlayerRole.WICKET_KEEPER),
    ("Rohit Sharma", 1, PlayerRole.BATSMAN),
    ("Steve Smith", 2, PlayerRole.BATSMAN),
    ("Pat Cummins", 2, PlayerRole.BOWLER),
    ("Glenn Maxwell", 2, PlayerRole.ALL_ROUNDER),
    ("Alex Carey", 2, PlayerRole.WICKET_KEEPER),
    ("David Warner", 2, PlayerRole.BATSMAN),
    ("Joe Root", 3, PlayerRole.BATSMAN),
    ("James Anderson", 3, PlayerRole.BOWLER),
    ("Ben Stokes", 3, PlayerRole.ALL_ROUNDER),
    ("Jos Buttler", 3, PlayerRole.WICKET_KEEPER),
    ("Jonny Bairstow", 3, PlayerRole.BATSMAN),
    ("Babar Azam", 4, PlayerRole.BATSMAN),
    ("Shaheen Afridi", 4, PlayerRole.BOWLER),
    ("Shadab Khan", 4, PlayerRole.ALL_ROUNDER),
    ("Mohammad Rizwan", 4, PlayerRole.WICKET_KEEPER),
    ("Fakhar Zaman", 4, PlayerRole.BATSMAN),
    ("Quinton de Kock", 5, PlayerRole.WICKET_KEEPER),
    ("Kagiso Rabada", 5, PlayerRole.BOWLER),
    ("Aiden Markram", 5, PlayerRole.BATSMAN),
    ("Keshav Maharaj", 5, PlayerRole.ALL_ROUNDER),
    ("Temba Bavuma", 5, PlayerRole.BATSMAN),
    ("Kane Williamson", 6, PlayerRole.BATSMAN),
    ("Trent Boult", 6, PlayerRole.BOWLER),
    ("Mitchell Santner", 6, PlayerRole.ALL_ROUNDER),
    ("Tom Latham", 6, PlayerRole.WICKET_KEEPER),
    ("Ross Taylor", 6, PlayerRole.BATSMAN),
]

# (venue, date, type, home side position, away side position)
MATCHES = [
    ("Melbourne Cricket Ground", date(2024, 1, 15), MatchType.ODI, 1, 2),
    ("Lord's Cricket Ground", date(2024, 2, 20), MatchType.TEST, 3, 4),
    ("Eden Gardens", date(2024, 3, 10), MatchType.T20, 5, 6),
    ("Sydney Cricket Ground", date(2024, 4, 5), MatchType.ODI, 1, 3),
    ("Wankhede Stadium", date(2024, 5, 12), MatchType.T20, 2, 4),
    ("The Oval", date(2024, 6, 18), MatchType.TEST, 5, 1),
    ("Dubai International Stadium", date(2024, 7, 22), MatchType.T10, 6, 2),
    ("Newlands Cricket Ground", date(2024, 8, 30), MatchType.ODI, 4, 3),
    ("Hagley Oval", date(2024, 9, 14), MatchType.T20, 1, 6),
    ("Old Trafford", date(2024, 10, 25), MatchType.ODI, 2, 5),
]

# (runs, wickets, overs) per match team, in match team order
SCORES = [
    (320, 7, 50.0), (315, 9, 50.0),
    (285, 8, 50.0), (290, 10, 48.5),
    (425, 10, 140.0), (380, 10, 128.3),
    (185, 6, 20.0), (188, 4, 19.2),
    (295, 5, 50.0), (298, 3, 49.1),
    (165, 8, 20.0), (168, 7, 19.5),
    (510, 10, 152.0), (485, 10, 145.2),
    (95, 5, 10.0), (92, 9, 10.0),
    (340, 6, 50.0), (335, 10, 49.4),
    (195, 7, 20.0), (198, 5, 19.3),
]

# (match position, player position, runs scored, wickets taken)
PERFORMANCES = [
    (1, 1, 85, 0), (1, 2, 5, 3), (1, 3, 42, 2), (1, 4, 28, 0), (1, 5, 55, 0),
    (1, 6, 120, 0), (1, 7, 8, 4), (1, 8, 32, 1), (1, 9, 0, 2), (1, 10, 45, 0),
    (2, 11, 95, 0), (2, 12, 2, 5), (2, 13, 68, 2), (2, 14, 38, 1), (2, 15, 22, 0),
    (2, 16, 110, 0), (2, 17, 0, 3), (2, 18, 45, 2), (2, 19, 58, 0), (2, 20, 12, 1),
    (3, 21, 75, 0), (3, 22, 0, 2), (3, 23, 52, 0), (3, 24, 35, 1), (3, 25, 18, 3),
    (3, 26, 88, 0), (3, 27, 5, 3), (3, 28, 62, 0), (3, 29, 0, 1), (3, 30, 48, 0),
    (4, 1, 102, 0), (4, 2, 0, 2), (4, 3, 28, 1), (4, 4, 15, 2), (4, 5, 65, 0),
    (4, 11, 88, 0), (4, 12, 0, 3), (4, 13, 55, 1), (4, 14, 42, 0), (4, 15, 8, 0),
    (5, 6, 45, 0), (5, 7, 12, 3), (5, 8, 38, 1), (5, 9, 0, 1), (5, 10, 72, 0),
    (5, 16, 72, 0), (5, 17, 0, 4), (5, 18, 52, 1), (5, 19, 25, 0), (5, 20, 0, 2),
    (6, 21, 125, 0), (6, 22, 0, 5), (6, 23, 92, 0), (6, 24, 18, 0), (6, 25, 0, 1),
    (6, 1, 78, 0), (6, 2, 0, 3), (6, 3, 35, 2), (6, 4, 0, 1), (6, 5, 58, 0),
    (7, 26, 28, 0), (7, 27, 0, 2), (7, 28, 65, 0), (7, 29, 22, 1), (7, 30, 35, 0),
    (7, 6, 42, 0), (7, 7, 5, 1), (7, 8, 88, 0), (7, 9, 0, 3), (7, 10, 95, 0),
    (8, 16, 105, 0), (8, 17, 0, 3), (8, 18, 48, 2), (8, 19, 62, 0), (8, 20, 15, 1),
    (8, 11, 92, 0), (8, 12, 0, 2), (8, 13, 72, 1), (8, 14, 28, 0), (8, 15, 5, 0),
    (9, 1, 68, 0), (9, 2, 0, 4), (9, 3, 52, 1), (9, 4, 12, 2), (9, 5, 82, 0),
    (9, 26, 75, 0), (9, 27, 0, 3), (9, 28, 45, 0), (9, 29, 18, 1), (9, 30, 38, 0),
    (10, 6, 115, 0), (10, 7, 0, 2), (10, 8, 58, 1), (10, 9, 0, 1), (10, 10, 95, 0),
    (10, 21, 88, 0), (10, 22, 0, 3), (10, 23, 65, 0), (10, 24, 32, 0), (10, 25, 0, 2),
]

AWARDS = [
    ("Player of the Match", AwardCategory.PERFORMANCE),
    ("Best Batsman", AwardCategory.PERFORMANCE),
    ("Best Bowler", AwardCategory.PERFORMANCE),
    ("Most Valuable Player", AwardCategory.SEASON),
    ("Best Fielder", AwardCategory.PERFORMANCE),
    ("Emerging Player", AwardCategory.SEASON),
    ("Captain of the Year", AwardCategory.LEADERSHIP),
    ("Fair Play Award", AwardCategory.CONDUCT),
]

# (player position, award position, year)
PLAYER_AWARDS = [
    (1, 1, 2024), (1, 2, 2023), (2, 3, 2024), (6, 2, 2024), (6, 4, 2023),
    (7, 3, 2023), (11, 2, 2022), (12, 3, 2022), (13, 4, 2022), (16, 2, 2021),
    (17, 6, 2021), (22, 3, 2021), (26, 7, 2021), (3, 5, 2023), (8, 1, 2023),
]


def _ids(session: Session, model) -> List[int]:
    return list(session.scalars(select(model.id).order_by(model.id)))


def _ref(ids: Sequence[int], position: int, table: str) -> int:
    if position > len(ids):
        raise ValueError(f"Seed data references {table} #{position} but only {len(ids)} rows exist")
    return ids[position - 1]


def _is_empty(session: Session, model) -> bool:
    return not session.scalar(select(func.count()).select_from(model))


def _seed_table(session: Session, model, build) -> int:
    """Insert the rows produced by ``build`` unless the table already has data."""
    table = model.__tablename__
    if not _is_empty(session, model):
        logger.info(f"Skipping {table}: already populated")
        return 0
    rows = build()
    session.add_all(rows)
    session.flush()
    logger.info(f"Seeded {len(rows)} rows into {table}")
    return len(rows)


def seed_all() -> Dict[str, int]:
    """Load the sample data set in dependency order; returns rows inserted per table."""
    stats: Dict[str, int] = {}
    with get_session() as session:
        stats["teams"] = _seed_table(
            session, Team, lambda: [Team(name=name, country=name) for name in TEAMS]
        )
        team_ids = _ids(session, Team)

        stats["players"] = _seed_table(session, Player, lambda: [
            Player(name=name, team_id=_ref(team_ids, team, "teams"), role=role)
            for name, team, role in PLAYERS
        ])
        player_ids = _ids(session, Player)

        stats["matches"] = _seed_table(session, Match, lambda: [
            Match(venue=venue, match_date=played_on, match_type=match_type)
            for venue, played_on, match_type, _, _ in MATCHES
        ])
        match_ids = _ids(session, Match)

        stats["match_teams"] = _seed_table(session, MatchTeam, lambda: [
            MatchTeam(match_id=_ref(match_ids, position, "matches"), team_id=_ref(team_ids, side, "teams"))
            for position, (_, _, _, home, away) in enumerate(MATCHES, start=1)
            for side in (home, away)
        ])
        match_team_ids = _ids(session, MatchTeam)

        stats["match_scores"] = _seed_table(session, MatchScore, lambda: [
            MatchScore(
                match_team_id=_ref(match_team_ids, position, "match_teams"),
                runs=runs,
                wickets=wickets,
                overs=overs,
            )
            for position, (runs, wickets, overs) in enumerate(SCORES, start=1)
        ])

        stats["performance"] = _seed_table(session, Performance, lambda: [
            Performance(
                match_id=_ref(match_ids, match, "matches"),
                player_id=_ref(player_ids, player, "players"),
                runs_scored=runs,
                wickets_taken=wickets,
            )
            for match, player, runs, wickets in PERFORMANCES
        ])

        stats["awards"] = _seed_table(session, Award, lambda: [
            Award(award_name=name, award_category=category) for name, category in AWARDS
        ])
        award_ids = _ids(session, Award)

        stats["player_awards"] = _seed_table(session, PlayerAward, lambda: [
            PlayerAward(
                player_id=_ref(player_ids, player, "players"),
                award_id=_ref(award_ids, award, "awards"),
                year=year,
            )
            for player, award, year in PLAYER_AWARDS
        ])

    logger.info(f"Seeding finished: {stats}")
    return stats
