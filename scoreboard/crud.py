from sqlalchemy import delete, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from scoreboard.models.schema_models import (
    IndividualResultSchema,
    PlayerSchema,
    TeamResultSchema,
    TeamSchema,
)
from scoreboard.models.schemas import (
    Event,
    IndividualResult,
    Player,
    Team,
    TeamResult,
)

# NOTE: none of these helpers commit. The caller owns the transaction
# (``async with session.begin():``) so several helpers can share one.


class ReadData:
    @staticmethod
    async def read_event(event_id: int, session: AsyncSession, lock: bool = False) -> Event | None:
        """Read one event row

        Args:
            event_id (int): To identify the event
            lock (bool): Take a row lock so writers of the same event serialize

        Returns:
            Event | None: The event row, or None if it does not exist
        """
        stmt = select(Event).where(Event.id == event_id)
        if lock:
            stmt = stmt.with_for_update()
        result = await session.execute(stmt)
        return result.scalars().first()

    @staticmethod
    async def read_events(session: AsyncSession) -> list[Event]:
        result = await session.execute(select(Event).order_by(Event.id))
        return list(result.scalars().all())

    @staticmethod
    async def read_teams(session: AsyncSession) -> list[TeamSchema]:
        result = await session.execute(select(Team).order_by(Team.id))
        return [TeamSchema.model_validate(row) for row in result.scalars().all()]

    @staticmethod
    async def read_players(session: AsyncSession) -> list[PlayerSchema]:
        result = await session.execute(select(Player).order_by(Player.id))
        return [PlayerSchema.model_validate(row) for row in result.scalars().all()]

    @staticmethod
    async def read_existing_ids(model, ids: list[int], session: AsyncSession) -> set[int]:
        """Return which of the given ids exist in the table of ``model``

        Args:
            model: Team or Player
            ids (list[int]): Ids referenced by a result payload

        Returns:
            set[int]: The subset of ids that exist
        """
        result = await session.execute(select(model.id).where(model.id.in_(ids)))
        return set(result.scalars().all())

    @staticmethod
    async def read_team_results(session: AsyncSession, event_id: int | None = None) -> list[TeamResultSchema]:
        """Read team-event results, counting only events flagged as team games

        Args:
            event_id (int | None): Restrict to one event when given

        Returns:
            list[TeamResultSchema]: Result rows ordered by event and position
        """
        stmt = (
            select(TeamResult)
            .join(Event, Event.id == TeamResult.event_id)
            .where(Event.is_team_game.is_(True))
            .order_by(TeamResult.event_id, TeamResult.position)
        )
        if event_id is not None:
            stmt = stmt.where(TeamResult.event_id == event_id)
        result = await session.execute(stmt)
        return [TeamResultSchema.model_validate(row) for row in result.scalars().all()]

    @staticmethod
    async def read_individual_results(
        session: AsyncSession, event_id: int | None = None
    ) -> list[IndividualResultSchema]:
        """Read individual-event results, counting only events not flagged as team games

        Args:
            event_id (int | None): Restrict to one event when given

        Returns:
            list[IndividualResultSchema]: Result rows ordered by event and position
        """
        stmt = (
            select(IndividualResult)
            .join(Event, Event.id == IndividualResult.event_id)
            .where(Event.is_team_game.is_(False))
            .order_by(IndividualResult.event_id, IndividualResult.position)
        )
        if event_id is not None:
            stmt = stmt.where(IndividualResult.event_id == event_id)
        result = await session.execute(stmt)
        return [IndividualResultSchema.model_validate(row) for row in result.scalars().all()]

    @staticmethod
    async def count_rows(model, session: AsyncSession) -> int:
        result = await session.execute(select(func.count()).select_from(model))
        return result.scalar_one()


class CreateData:
    @staticmethod
    async def create_event(name: str, is_team_game: bool, session: AsyncSession) -> int:
        """Add an event and return its id"""
        event = Event(name=name, is_team_game=is_team_game)
        session.add(event)
        await session.flush()
        return event.id

    @staticmethod
    async def create_team(name: str, session: AsyncSession) -> int:
        """Add a team and return its id"""
        team = Team(name=name)
        session.add(team)
        await session.flush()
        return team.id

    @staticmethod
    async def create_player(name: str, team_id: int, session: AsyncSession) -> int:
        """Add a player of ``team_id`` and return its id"""
        player = Player(name=name, team_id=team_id)
        session.add(player)
        await session.flush()
        return player.id

    @staticmethod
    async def add_team_results(event_id: int, placed: dict[int, int], points: dict[int, int], session: AsyncSession):
        """Insert team results for one event

        Args:
            event_id (int): To identify the event
            placed (dict[int, int]): position -> team id
            points (dict[int, int]): position -> points awarded
        """
        session.add_all(
            [
                TeamResult(event_id=event_id, team_id=team_id, position=position, points=points[position])
                for position, team_id in placed.items()
            ]
        )
        await session.flush()

    @staticmethod
    async def add_individual_results(
        event_id: int, placed: dict[int, int], points: dict[int, int], session: AsyncSession
    ):
        """Insert individual results for one event, none of them MVP

        Args:
            event_id (int): To identify the event
            placed (dict[int, int]): position -> player id
            points (dict[int, int]): position -> points awarded
        """
        session.add_all(
            [
                IndividualResult(
                    event_id=event_id,
                    player_id=player_id,
                    position=position,
                    points=points[position],
                    mvp=False,
                )
                for position, player_id in placed.items()
            ]
        )
        await session.flush()


class UpdateData:
    @staticmethod
    async def clear_mvp_no_commit(event_id: int, session: AsyncSession) -> None:
        stmt = (
            update(IndividualResult)
            .where(IndividualResult.event_id == event_id)
            .values(mvp=False)
            .execution_options(synchronize_session=False)
        )
        await session.execute(stmt)

    @staticmethod
    async def set_mvp_no_commit(event_id: int, player_id: int, session: AsyncSession) -> int:
        """Flag the player's result row in the event as MVP

        Returns:
            int: Number of rows updated (0 when the player has no result there)
        """
        stmt = (
            update(IndividualResult)
            .where(
                IndividualResult.event_id == event_id,
                IndividualResult.player_id == player_id,
            )
            .values(mvp=True)
            .execution_options(synchronize_session=False)
        )
        result = await session.execute(stmt)
        return result.rowcount


class DeleteData:
    @staticmethod
    async def delete_team_results_no_commit(event_id: int, session: AsyncSession) -> None:
        await session.execute(
            delete(TeamResult)
            .where(TeamResult.event_id == event_id)
            .execution_options(synchronize_session=False)
        )

    @staticmethod
    async def delete_individual_results_no_commit(event_id: int, session: AsyncSession) -> None:
        await session.execute(
            delete(IndividualResult)
            .where(IndividualResult.event_id == event_id)
            .execution_options(synchronize_session=False)
        )
