from pydantic import BaseModel
from pydantic.alias_generators import to_camel

from scoreboard.domain.result_rules import EventKind


class EventSchema(BaseModel):
    id: int
    name: str
    type: EventKind

    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True


class TeamSchema(BaseModel):
    id: int
    name: str

    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True


class PlayerSchema(BaseModel):
    id: int
    name: str
    team_id: int

    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True


class TeamResultSchema(BaseModel):
    event_id: int
    team_id: int
    position: int
    points: int

    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True


class IndividualResultSchema(BaseModel):
    event_id: int
    player_id: int
    position: int
    points: int
    mvp: bool = False

    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True


class TeamStandingSchema(BaseModel):
    team_id: int
    team_name: str
    total_points: int

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class MedalRowSchema(BaseModel):
    team_id: int
    team_name: str
    gold: int
    silver: int
    bronze: int

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class TopTeamSchema(MedalRowSchema):
    total_points: int


class RankedTeamSchema(TopTeamSchema):
    rank: int


class TopPlayerSchema(BaseModel):
    player_id: int
    player_name: str
    team_id: int
    team_name: str
    gold: int
    silver: int
    bronze: int
    points: int

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class RankedPlayerSchema(BaseModel):
    player_id: int
    player_name: str
    team_id: int
    team_name: str
    gold: int
    silver: int
    bronze: int
    total_points: int
    rank: int

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class HighlightsSchema(BaseModel):
    top_team: TopTeamSchema | None = None
    top_player: TopPlayerSchema | None = None

    class Config:
        alias_generator = to_camel
        populate_by_name = True
