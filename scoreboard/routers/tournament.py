from typing import List

from fastapi import APIRouter, HTTPException, Path, Response, status

from scoreboard.domain.errors import (
    ConflictError,
    NotFoundError,
    ScoreboardError,
    ValidationError,
)
from scoreboard.models.dc_models import MvpModel, ResultPayloadModel
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
from scoreboard.services import results_db, standings_db

tournament_router = APIRouter(prefix="/api")


def to_http_exception(e: ScoreboardError) -> HTTPException:
    """Map the error taxonomy to a status code the client can act on"""
    if isinstance(e, NotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    if isinstance(e, ValidationError):
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    if isinstance(e, ConflictError):
        return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))


class HealthAPI:
    @staticmethod
    @tournament_router.get("/health")
    async def health():
        return {"ok": True}


class CollectionAPI:
    @staticmethod
    @tournament_router.get("/events", response_model=List[EventSchema])
    async def get_events():
        try:
            return await standings_db.list_events()
        except ScoreboardError as e:
            raise to_http_exception(e) from e

    @staticmethod
    @tournament_router.get("/teams", response_model=List[TeamSchema])
    async def get_teams():
        try:
            return await standings_db.list_teams()
        except ScoreboardError as e:
            raise to_http_exception(e) from e

    @staticmethod
    @tournament_router.get("/players", response_model=List[PlayerSchema])
    async def get_players():
        try:
            return await standings_db.list_players()
        except ScoreboardError as e:
            raise to_http_exception(e) from e


class ResultAPI:
    @staticmethod
    @tournament_router.post(
        "/events/{event_id}/results", status_code=status.HTTP_204_NO_CONTENT
    )
    async def post_results(payload: ResultPayloadModel, event_id: int = Path(...)):
        """Replace the results of one event.

        Team events take winnerTeamId and secondTeamId, individual events take
        firstPlayerId, secondPlayerId and thirdPlayerId.
        """
        try:
            await results_db.record_results(event_id, payload)
        except ScoreboardError as e:
            raise to_http_exception(e) from e
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    @staticmethod
    @tournament_router.put("/events/{event_id}/mvp", status_code=status.HTTP_204_NO_CONTENT)
    async def put_mvp(payload: MvpModel, event_id: int = Path(...)):
        try:
            await results_db.set_mvp(event_id, payload.player_id)
        except ScoreboardError as e:
            raise to_http_exception(e) from e
        return Response(status_code=status.HTTP_204_NO_CONTENT)


class StandingsAPI:
    @staticmethod
    @tournament_router.get("/standings/teams", response_model=List[TeamStandingSchema])
    async def get_team_standings():
        try:
            return await standings_db.read_team_standings()
        except ScoreboardError as e:
            raise to_http_exception(e) from e

    @staticmethod
    @tournament_router.get("/standings/ranked", response_model=List[RankedTeamSchema])
    async def get_ranked_team_standings():
        try:
            return await standings_db.read_ranked_team_standings()
        except ScoreboardError as e:
            raise to_http_exception(e) from e

    @staticmethod
    @tournament_router.get("/standings/players", response_model=List[RankedPlayerSchema])
    async def get_ranked_player_standings():
        try:
            return await standings_db.read_ranked_player_standings()
        except ScoreboardError as e:
            raise to_http_exception(e) from e

    @staticmethod
    @tournament_router.get("/medals", response_model=List[MedalRowSchema])
    async def get_medals():
        try:
            return await standings_db.read_medal_table()
        except ScoreboardError as e:
            raise to_http_exception(e) from e

    @staticmethod
    @tournament_router.get("/highlights", response_model=HighlightsSchema)
    async def get_highlights():
        try:
            return await standings_db.read_highlights()
        except ScoreboardError as e:
            raise to_http_exception(e) from e
