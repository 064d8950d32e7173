"""Standings, medal tallies, dense ranking and highlights.

Everything here is recomputed from the stored result rows on every call.
Team totals mix two sources: points of the team's players in individual
events, and points won by the team itself in team events. Team events only
award gold and silver.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, Sequence, TypeVar

from scoreboard.domain.result_rules import medal_for_position
from scoreboard.models.schema_models import (
    HighlightsSchema,
    IndividualResultSchema,
    MedalRowSchema,
    PlayerSchema,
    RankedPlayerSchema,
    RankedTeamSchema,
    TeamResultSchema,
    TeamSchema,
    TeamStandingSchema,
    TopPlayerSchema,
    TopTeamSchema,
)

T = TypeVar("T")


@dataclass
class Tally:
    gold: int = 0
    silver: int = 0
    bronze: int = 0
    total_points: int = 0

    def add(self, position: int, points: int) -> None:
        medal = medal_for_position(position)
        if medal is not None:
            setattr(self, medal, getattr(self, medal) + 1)
        self.total_points += points


@dataclass
class _Entry:
    id: int
    name: str
    tally: Tally

    def ranking_key(self) -> tuple:
        """gold desc, silver desc, bronze desc, points desc, name asc"""
        t = self.tally
        return (-t.gold, -t.silver, -t.bronze, -t.total_points, self.name)


def tally_teams(
    teams: Sequence[TeamSchema],
    players: Sequence[PlayerSchema],
    team_results: Iterable[TeamResultSchema],
    individual_results: Iterable[IndividualResultSchema],
) -> dict[int, Tally]:
    """Sum points and medals per team across both result kinds.

    Every team gets an entry, including teams without results.
    """
    tallies = {team.id: Tally() for team in teams}
    team_of_player = {player.id: player.team_id for player in players}

    for row in individual_results:
        team_id = team_of_player.get(row.player_id)
        if team_id in tallies:
            tallies[team_id].add(row.position, row.points)

    for row in team_results:
        if row.team_id in tallies:
            tallies[row.team_id].add(row.position, row.points)

    return tallies


def tally_players(
    players: Sequence[PlayerSchema],
    individual_results: Iterable[IndividualResultSchema],
) -> dict[int, Tally]:
    """Sum points and medals per player over individual events only."""
    tallies = {player.id: Tally() for player in players}
    for row in individual_results:
        if row.player_id in tallies:
            tallies[row.player_id].add(row.position, row.points)
    return tallies


def dense_rank(rows: Iterable[T], key: Callable[[T], tuple]) -> list[tuple[int, T]]:
    """Sort rows by ``key`` and number them with a dense rank.

    Rows with equal keys share a rank; the next distinct key gets the previous
    rank + 1, so ranks have no gaps. The sort is stable, so callers control the
    order inside a tie by the order they pass rows in.
    """
    ranked = []
    rank = 0
    previous = None
    for row in sorted(rows, key=key):
        current = key(row)
        if rank == 0 or current != previous:
            rank += 1
            previous = current
        ranked.append((rank, row))
    return ranked


def _team_entries(teams: Sequence[TeamSchema], tallies: dict[int, Tally]) -> list[_Entry]:
    # Id order first so that full ties come out lowest id first.
    return [_Entry(team.id, team.name, tallies[team.id]) for team in sorted(teams, key=lambda t: t.id)]


def team_standings(
    teams: Sequence[TeamSchema],
    players: Sequence[PlayerSchema],
    team_results: Iterable[TeamResultSchema],
    individual_results: Iterable[IndividualResultSchema],
) -> list[TeamStandingSchema]:
    """Team totals ordered by points desc, then name."""
    tallies = tally_teams(teams, players, team_results, individual_results)
    entries = sorted(
        _team_entries(teams, tallies),
        key=lambda e: (-e.tally.total_points, e.name),
    )
    return [
        TeamStandingSchema(team_id=e.id, team_name=e.name, total_points=e.tally.total_points)
        for e in entries
    ]


def medal_table(
    teams: Sequence[TeamSchema],
    players: Sequence[PlayerSchema],
    team_results: Iterable[TeamResultSchema],
    individual_results: Iterable[IndividualResultSchema],
) -> list[MedalRowSchema]:
    """Medals per team ordered gold, silver, bronze desc, then name."""
    tallies = tally_teams(teams, players, team_results, individual_results)
    entries = sorted(
        _team_entries(teams, tallies),
        key=lambda e: (-e.tally.gold, -e.tally.silver, -e.tally.bronze, e.name),
    )
    return [
        MedalRowSchema(
            team_id=e.id,
            team_name=e.name,
            gold=e.tally.gold,
            silver=e.tally.silver,
            bronze=e.tally.bronze,
        )
        for e in entries
    ]


def ranked_teams(
    teams: Sequence[TeamSchema],
    players: Sequence[PlayerSchema],
    team_results: Iterable[TeamResultSchema],
    individual_results: Iterable[IndividualResultSchema],
) -> list[RankedTeamSchema]:
    """Olympic-style table: gold, silver, bronze, points, then name."""
    tallies = tally_teams(teams, players, team_results, individual_results)
    ranked = dense_rank(_team_entries(teams, tallies), key=_Entry.ranking_key)
    return [
        RankedTeamSchema(
            team_id=e.id,
            team_name=e.name,
            gold=e.tally.gold,
            silver=e.tally.silver,
            bronze=e.tally.bronze,
            total_points=e.tally.total_points,
            rank=rank,
        )
        for rank, e in ranked
    ]


def ranked_players(
    teams: Sequence[TeamSchema],
    players: Sequence[PlayerSchema],
    individual_results: Iterable[IndividualResultSchema],
) -> list[RankedPlayerSchema]:
    """Olympic-style table over players, from individual events only."""
    tallies = tally_players(players, individual_results)
    team_names = {team.id: team.name for team in teams}
    team_of_player = {player.id: player.team_id for player in players}

    entries = [
        _Entry(player.id, player.name, tallies[player.id])
        for player in sorted(players, key=lambda p: p.id)
    ]
    return [
        RankedPlayerSchema(
            player_id=e.id,
            player_name=e.name,
            team_id=team_of_player[e.id],
            team_name=team_names.get(team_of_player[e.id], ""),
            gold=e.tally.gold,
            silver=e.tally.silver,
            bronze=e.tally.bronze,
            total_points=e.tally.total_points,
            rank=rank,
        )
        for rank, e in dense_rank(entries, key=_Entry.ranking_key)
    ]


def _top_player_key(row: RankedPlayerSchema) -> tuple:
    """points desc, gold desc, silver desc, bronze desc, name asc"""
    return (-row.total_points, -row.gold, -row.silver, -row.bronze, row.player_name)


def highlights(
    teams: Sequence[TeamSchema],
    players: Sequence[PlayerSchema],
    team_results: Sequence[TeamResultSchema],
    individual_results: Sequence[IndividualResultSchema],
) -> HighlightsSchema:
    """Top team by the ranked-table order and top player by points first.

    A tie left after the name comparison goes to the lowest id and is logged.
    """
    top_team = None
    team_rows = ranked_teams(teams, players, team_results, individual_results)
    if team_rows:
        best = team_rows[0]
        if len(team_rows) > 1 and team_rows[1].rank == best.rank:
            logging.warning(
                f"Top team tied with team {team_rows[1].team_id} on every criterion; picked team {best.team_id} by id"
            )
        top_team = TopTeamSchema(
            team_id=best.team_id,
            team_name=best.team_name,
            gold=best.gold,
            silver=best.silver,
            bronze=best.bronze,
            total_points=best.total_points,
        )

    top_player = None
    player_rows = sorted(
        # Id order inside a full tie.
        sorted(ranked_players(teams, players, individual_results), key=lambda r: r.player_id),
        key=_top_player_key,
    )
    if player_rows:
        best = player_rows[0]
        if len(player_rows) > 1 and _top_player_key(player_rows[1]) == _top_player_key(best):
            logging.warning(
                f"Top player tied with player {player_rows[1].player_id} on every criterion; picked player {best.player_id} by id"
            )
        top_player = TopPlayerSchema(
            player_id=best.player_id,
            player_name=best.player_name,
            team_id=best.team_id,
            team_name=best.team_name,
            gold=best.gold,
            silver=best.silver,
            bronze=best.bronze,
            points=best.total_points,
        )

    return HighlightsSchema(top_team=top_team, top_player=top_player)
