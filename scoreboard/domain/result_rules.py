"""Result rules that are independent from HTTP and DB.

Rule of thumb:
- OK: point tables, medal mapping, payload validation.
- Not OK: touching DB sessions or FastAPI.
"""

from enum import Enum

from scoreboard.domain.errors import ValidationError


class EventKind(str, Enum):
    team = "team"
    individual = "individual"

    @classmethod
    def from_is_team_game(cls, is_team_game: bool) -> "EventKind":
        return cls.team if is_team_game else cls.individual


# Server-side source of truth for points; client-supplied points are ignored.
TEAM_POINTS = {1: 20, 2: 10}
INDIVIDUAL_POINTS = {1: 10, 2: 5, 3: 2}

MEDALS = {1: "gold", 2: "silver", 3: "bronze"}


def points_table(kind: EventKind) -> dict[int, int]:
    """Return the position -> points table for the given event kind."""
    if kind is EventKind.team:
        return TEAM_POINTS
    return INDIVIDUAL_POINTS


def medal_for_position(position: int) -> str | None:
    """Return "gold", "silver", "bronze" or None for an unplaced position."""
    return MEDALS.get(position)


def validate_placement(kind: EventKind, ids: list[int | None]) -> list[int]:
    """Check the ids placed 1st, 2nd (and 3rd) for an event of the given kind.

    Args:
        kind (EventKind): Kind of the event, read from storage
        ids (list[int | None]): Team ids for team events, player ids otherwise,
            in finishing order

    Returns:
        list[int]: The ids, in finishing order

    Raises:
        ValidationError: An id is missing, the count does not match the
            event kind, or the same id is placed twice
    """
    expected = len(points_table(kind))
    label = "team" if kind is EventKind.team else "player"

    if len(ids) != expected or any(i is None for i in ids):
        if kind is EventKind.team:
            raise ValidationError(
                "winnerTeamId and secondTeamId are required for team events"
            )
        raise ValidationError(
            "firstPlayerId, secondPlayerId, thirdPlayerId are required for individual events"
        )

    if len(set(ids)) != len(ids):
        raise ValidationError(f"The same {label} cannot take more than one position")

    return list(ids)
