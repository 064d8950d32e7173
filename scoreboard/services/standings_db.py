"""DB service layer for the read use cases.

Every view reads the rows it needs in one session (one snapshot on
PostgreSQL) and hands them to the pure functions in
``scoreboard.domain.standings``; nothing is cached between calls.
"""

import logging

from sqlalchemy.exc import SQLAlchemyError

from scoreboard.crud import ReadData
from scoreboard.db import Session
from scoreboard.domain import standings
from scoreboard.domain.errors import StorageError
from scoreboard.domain.result_rules import EventKind
from scoreboard.models.schema_models import (
    EventSchema,
    HighlightsSchema,
    MedalRowSchema,
    PlayerSchema,
    RankedPlayerSchema,
    RankedTeamSchema,
    TeamSchema,
    TeamStandingSchema,
)


def snapshot_execution_options(dialect_name: str) -> dict:
    """Connection options that make the view reads share one snapshot.

    PostgreSQL at read committed gives every statement its own snapshot, so
    the reads are pinned with REPEATABLE READ. The SQLite driver opens no
    transaction for plain SELECTs; there the reads run one after another.
    """
    if dialect_name == "postgresql":
        return {"isolation_level": "REPEATABLE READ"}
    return {}


async def _read_snapshot():
    """Read teams, players and both result kinds for one view."""
    try:
        async with Session() as session:
            async with session.begin():
                # Must be the first connection use of the transaction.
                options = snapshot_execution_options(session.bind.dialect.name)
                if options:
                    await session.connection(execution_options=options)
                teams = await ReadData.read_teams(session)
                players = await ReadData.read_players(session)
                team_results = await ReadData.read_team_results(session)
                individual_results = await ReadData.read_individual_results(session)
    except SQLAlchemyError as e:
        logging.error(f"Failed to read results: {e}")
        raise StorageError("Failed to read results") from e
    return teams, players, team_results, individual_results


async def list_events() -> list[EventSchema]:
    try:
        async with Session() as session:
            events = await ReadData.read_events(session)
    except SQLAlchemyError as e:
        logging.error(f"Failed to read events: {e}")
        raise StorageError("Failed to fetch events") from e
    return [
        EventSchema(id=event.id, name=event.name, type=EventKind.from_is_team_game(event.is_team_game))
        for event in events
    ]


async def list_teams() -> list[TeamSchema]:
    try:
        async with Session() as session:
            return await ReadData.read_teams(session)
    except SQLAlchemyError as e:
        logging.error(f"Failed to read teams: {e}")
        raise StorageError("Failed to fetch teams") from e


async def list_players() -> list[PlayerSchema]:
    try:
        async with Session() as session:
            return await ReadData.read_players(session)
    except SQLAlchemyError as e:
        logging.error(f"Failed to read players: {e}")
        raise StorageError("Failed to fetch players") from e


async def read_team_standings() -> list[TeamStandingSchema]:
    teams, players, team_results, individual_results = await _read_snapshot()
    return standings.team_standings(teams, players, team_results, individual_results)


async def read_ranked_team_standings() -> list[RankedTeamSchema]:
    teams, players, team_results, individual_results = await _read_snapshot()
    return standings.ranked_teams(teams, players, team_results, individual_results)


async def read_ranked_player_standings() -> list[RankedPlayerSchema]:
    teams, players, _, individual_results = await _read_snapshot()
    return standings.ranked_players(teams, players, individual_results)


async def read_medal_table() -> list[MedalRowSchema]:
    teams, players, team_results, individual_results = await _read_snapshot()
    return standings.medal_table(teams, players, team_results, individual_results)


async def read_highlights() -> HighlightsSchema:
    teams, players, team_results, individual_results = await _read_snapshot()
    return standings.highlights(teams, players, team_results, individual_results)
