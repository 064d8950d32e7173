from pydantic import BaseModel, field_validator
from pydantic.alias_generators import to_camel

from scoreboard.domain.result_rules import EventKind


def _reject_bool(value):
    """Ids are numbers; lax int parsing would read true as 1."""
    if isinstance(value, bool):
        raise ValueError("must be an integer id, not a boolean")
    return value


class ResultPayloadModel(BaseModel):
    """Result body for either event kind.

    Team events read winnerTeamId/secondTeamId, individual events read
    firstPlayerId/secondPlayerId/thirdPlayerId. Which pair applies is decided
    by the stored event, so a client "type" field or points are ignored.
    """

    winner_team_id: int | None = None
    second_team_id: int | None = None
    first_player_id: int | None = None
    second_player_id: int | None = None
    third_player_id: int | None = None

    class Config:
        alias_generator = to_camel
        populate_by_name = True

    @field_validator(
        "winner_team_id",
        "second_team_id",
        "first_player_id",
        "second_player_id",
        "third_player_id",
        mode="before",
    )
    @classmethod
    def reject_bool_id(cls, value):
        return _reject_bool(value)

    def placement(self, kind: EventKind) -> list[int | None]:
        """Return the ids this payload places 1st, 2nd (and 3rd) for the event kind."""
        if kind is EventKind.team:
            return [self.winner_team_id, self.second_team_id]
        return [self.first_player_id, self.second_player_id, self.third_player_id]


class MvpModel(BaseModel):
    player_id: int | None = None

    class Config:
        alias_generator = to_camel
        populate_by_name = True

    @field_validator("player_id", mode="before")
    @classmethod
    def reject_bool_id(cls, value):
        return _reject_bool(value)


class SeedTeamModel(BaseModel):
    name: str
    players: list[str] = []


class SeedEventModel(BaseModel):
    name: str
    is_team_game: bool

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class SeedModel(BaseModel):
    """Teams, their players and events loaded into an empty store."""

    teams: list[SeedTeamModel] = []
    events: list[SeedEventModel] = []
