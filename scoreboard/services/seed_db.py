"""Out-of-band seeding of events, teams and players."""

import logging

from scoreboard.crud import CreateData, ReadData
from scoreboard.db import Session
from scoreboard.models.dc_models import SeedModel
from scoreboard.models.schemas import Event, Team


async def seed_if_empty(seed: SeedModel) -> bool:
    """Insert the seed data unless events or teams already exist.

    Returns:
        bool: True when the seed was written
    """
    async with Session() as session:
        async with session.begin():
            if await ReadData.count_rows(Event, session) or await ReadData.count_rows(Team, session):
                logging.info("Store already holds events or teams, skipping seed")
                return False

            for team in seed.teams:
                team_id = await CreateData.create_team(team.name, session)
                for player_name in team.players:
                    await CreateData.create_player(player_name, team_id, session)
            for event in seed.events:
                await CreateData.create_event(event.name, event.is_team_game, session)

    logging.info(f"Seeded {len(seed.teams)} teams and {len(seed.events)} events")
    return True
