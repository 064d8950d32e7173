from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from scoreboard.create_postgres_engine import create_postgres_engine
from scoreboard.create_sqlite_engine import create_sqlite_engine
from scoreboard.load_secrets import database_url


def create_engine(url: str) -> AsyncEngine:
    if url.startswith("sqlite"):
        return create_sqlite_engine(url)
    return create_postgres_engine(url)


def create_session_factory(bind: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        class_=AsyncSession,
        autoflush=True,
        expire_on_commit=False,
        bind=bind,
    )


engine = create_engine(database_url())

# Centralized session factory to avoid creating it in router modules.
Session = create_session_factory(engine)
