import logging
import pathlib
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from starlette.middleware.cors import CORSMiddleware

from scoreboard.db import engine
from scoreboard.load_secrets import (
    cors_origins,
    log_level,
    seed_file,
    server_host,
    server_port,
)
from scoreboard.models.dc_models import SeedModel
from scoreboard.models.schemas import Base
from scoreboard.routers import tournament
from scoreboard.services import seed_db

logging.basicConfig(level=log_level)


@asynccontextmanager
async def lifespan(app):
    """Create missing tables and load the seed file, if one is configured.
    This function is called to start the server.
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    if seed_file:
        seed = SeedModel.model_validate_json(pathlib.Path(seed_file).read_text())
        await seed_db.seed_if_empty(seed)

    try:
        yield
    finally:
        await engine.dispose()
        logging.info("Stop Server")


app = FastAPI(lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.include_router(tournament.tournament_router)


def run():
    """Serve the app with uvicorn on HOST:PORT."""
    uvicorn.run(app, host=server_host, port=server_port)


if __name__ == "__main__":
    run()
