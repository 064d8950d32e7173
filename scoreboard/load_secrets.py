import os
import pathlib
from dotenv import load_dotenv

load_dotenv()

user = os.getenv("DB_USER")
password = os.getenv("DB_PASSWORD")
host = os.getenv("DB_HOST")
port = os.getenv("DB_PORT", "5432")
db_name = os.getenv("DB_NAME")

pool_size = int(os.getenv("DB_POOL_SIZE", "20"))
max_overflow = int(os.getenv("DB_MAX_OVERFLOW", "20"))
statement_timeout_ms = os.getenv("DB_STATEMENT_TIMEOUT_MS")

seed_file = os.getenv("SEED_FILE")

server_host = os.getenv("HOST", "0.0.0.0")
server_port = int(os.getenv("PORT", "5000"))

log_level = os.getenv("LOG_LEVEL", "INFO").upper()
cors_origins = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "*").split(",")
    if origin.strip()
]

sqlite_path = pathlib.Path(__file__).parents[1] / "scoreboard.sqlite3"


def database_url() -> str:
    """Return the SQLAlchemy URL of the configured store.

    DATABASE_URL wins; otherwise the DB_* variables describe a PostgreSQL
    server, and without a DB_HOST a local SQLite file is used.
    """
    url = os.getenv("DATABASE_URL")
    if url:
        return url
    if host:
        return f"postgresql+asyncpg://{user}:{password}@{host}:{port}/{db_name}"
    return f"sqlite+aiosqlite:///{sqlite_path}"


if __name__ == "__main__":
    print(database_url(), pool_size, max_overflow, log_level)
