from types import SimpleNamespace

import pytest

from scoreboard.crud import CreateData
from scoreboard.db import create_engine, create_session_factory
from scoreboard.models.schemas import Base
from scoreboard.services import results_db, seed_db, standings_db


@pytest.fixture
async def session_factory(tmp_path, monkeypatch):
    """Fresh SQLite store wired into every service module."""
    engine = create_engine(f"sqlite+aiosqlite:///{tmp_path / 'scoreboard.sqlite3'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    factory = create_session_factory(engine)
    for module in (results_db, standings_db, seed_db):
        monkeypatch.setattr(module, "Session", factory)

    yield factory
    await engine.dispose()


@pytest.fixture
async def tournament(session_factory):
    """Three teams, five players, two team events and two individual events."""
    ids = SimpleNamespace()
    async with session_factory() as session:
        async with session.begin():
            ids.red = await CreateData.create_team("Red", session)
            ids.blue = await CreateData.create_team("Blue", session)
            ids.green = await CreateData.create_team("Green", session)

            ids.ann = await CreateData.create_player("Ann", ids.red, session)
            ids.bob = await CreateData.create_player("Bob", ids.red, session)
            ids.cid = await CreateData.create_player("Cid", ids.blue, session)
            ids.dee = await CreateData.create_player("Dee", ids.blue, session)
            ids.eve = await CreateData.create_player("Eve", ids.green, session)

            ids.relay = await CreateData.create_event("Relay", True, session)
            ids.tug = await CreateData.create_event("Tug of war", True, session)
            ids.sprint = await CreateData.create_event("Sprint", False, session)
            ids.jump = await CreateData.create_event("Long jump", False, session)
    return ids
