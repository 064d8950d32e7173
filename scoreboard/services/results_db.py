"""DB service layer for the write use cases: recording results and MVPs.

- Routers should not touch DB sessions directly; they call this module.
- This layer owns session/transaction boundaries.
- Each use case runs in one transaction; any error raised inside it rolls
  the whole transaction back, so prior results stay intact.
"""

import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from scoreboard.crud import CreateData, DeleteData, ReadData, UpdateData
from scoreboard.db import Session
from scoreboard.domain.errors import (
    ConflictError,
    NotFoundError,
    RecordingError,
    ScoreboardError,
    ValidationError,
)
from scoreboard.domain.result_rules import EventKind, points_table, validate_placement
from scoreboard.models.dc_models import ResultPayloadModel
from scoreboard.models.schemas import Player, Team


SERIALIZATION_FAILURES = ("40001", "40P01")


def _storage_failure(action: str, event_id: int, e: SQLAlchemyError) -> RecordingError:
    logging.error(f"Failed to {action} for event {event_id}: {e}")
    sqlstate = getattr(getattr(e, "orig", None), "sqlstate", None)
    if isinstance(e, IntegrityError) or sqlstate in SERIALIZATION_FAILURES:
        return ConflictError(f"Concurrent update while trying to {action} for event {event_id}")
    return RecordingError(f"Could not {action} for event {event_id}")


async def record_results(event_id: int, payload: ResultPayloadModel) -> EventKind:
    """Replace the whole result set of one event.

    The event row is read (and locked) first; its team-game flag decides
    which ids of the payload are used and which table is rewritten. Points
    come from the fixed point tables.

    Args:
        event_id (int): To identify the event
        payload (ResultPayloadModel): Placed team ids or player ids

    Returns:
        EventKind: Kind of the event that was recorded

    Raises:
        NotFoundError: The event, or a placed team/player, does not exist
        ValidationError: Ids are missing or repeated for this event kind
        RecordingError: The store failed; nothing was changed
    """
    try:
        async with Session() as session:
            async with session.begin():
                event = await ReadData.read_event(event_id, session, lock=True)
                if event is None:
                    raise NotFoundError(f"Event {event_id} not found")

                kind = EventKind.from_is_team_game(event.is_team_game)
                ids = validate_placement(kind, payload.placement(kind))

                model = Team if kind is EventKind.team else Player
                existing = await ReadData.read_existing_ids(model, ids, session)
                missing = [i for i in ids if i not in existing]
                if missing:
                    raise NotFoundError(f"{model.__name__} {missing[0]} not found")

                placed = {position: placed_id for position, placed_id in enumerate(ids, start=1)}
                points = points_table(kind)
                if kind is EventKind.team:
                    await DeleteData.delete_team_results_no_commit(event_id, session)
                    await CreateData.add_team_results(event_id, placed, points, session)
                else:
                    await DeleteData.delete_individual_results_no_commit(event_id, session)
                    await CreateData.add_individual_results(event_id, placed, points, session)
    except ScoreboardError as e:
        if not isinstance(e, RecordingError):
            logging.warning(f"Rejected results for event {event_id}: {e}")
        raise
    except SQLAlchemyError as e:
        raise _storage_failure("record results", event_id, e) from e

    logging.info(f"Recorded {kind.value} results for event {event_id}: {ids}")
    return kind


async def set_mvp(event_id: int, player_id: int | None) -> None:
    """Make ``player_id`` the only MVP of an individual event.

    Raises:
        NotFoundError: The event does not exist
        ValidationError: The event is a team game, or the player has no
            result in it; the previous MVP is kept
        RecordingError: The store failed; nothing was changed
    """
    try:
        async with Session() as session:
            async with session.begin():
                if player_id is None:
                    raise ValidationError("playerId required")

                event = await ReadData.read_event(event_id, session, lock=True)
                if event is None:
                    raise NotFoundError(f"Event {event_id} not found")
                if event.is_team_game:
                    raise ValidationError("MVP not applicable to team games")

                await UpdateData.clear_mvp_no_commit(event_id, session)
                updated = await UpdateData.set_mvp_no_commit(event_id, player_id, session)
                if updated == 0:
                    raise ValidationError(
                        f"No individual result found for player {player_id} in event {event_id}"
                    )
    except ScoreboardError as e:
        if not isinstance(e, RecordingError):
            logging.warning(f"Rejected MVP for event {event_id}: {e}")
        raise
    except SQLAlchemyError as e:
        raise _storage_failure("set MVP", event_id, e) from e

    logging.info(f"Set MVP of event {event_id} to player {player_id}")
