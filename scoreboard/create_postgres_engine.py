from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from scoreboard.load_secrets import max_overflow, pool_size, statement_timeout_ms


def create_postgres_engine(url: str) -> AsyncEngine:
    connect_args = {}
    if statement_timeout_ms:
        # A timed out statement aborts the surrounding transaction.
        connect_args["server_settings"] = {"statement_timeout": str(statement_timeout_ms)}

    return create_async_engine(
        url,
        pool_size=pool_size,
        max_overflow=max_overflow,
        pool_pre_ping=True,
        connect_args=connect_args,
    )
