from contextlib import contextmanager
from contextvars import ContextVar
from pathlib import Path
from typing import Iterator, Optional

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Connection, Engine

from sea.settings import settings

DEFAULT_DATABASE_URL = "sqlite:///invoicing.db"
SCHEMA_FILE = Path(__file__).parent.parent / "queries" / "schema.sql"

_engine: Engine | None = None
# Connection of the transaction in progress, shared by nested connection() blocks
_active: ContextVar[Optional[Connection]] = ContextVar("invoicing_connection", default=None)


def get_engine() -> Engine:
    """Provide a singleton SQLAlchemy engine."""
    global _engine
    if _engine is None:
        _engine = create_engine(getattr(settings, "database_url", DEFAULT_DATABASE_URL))
    return _engine


def configure_engine(url: str) -> Engine:
    """Replace the engine, e.g. to point tests at a throwaway database."""
    global _engine
    if _engine is not None:
        _engine.dispose()
    _engine = create_engine(url)
    return _engine


@contextmanager
def connection() -> Iterator[Connection]:
    """Run the block in one transaction; nested blocks join the outer one.

    Commits when the outermost block exits normally, rolls back otherwise.
    """
    active = _active.get()
    if active is not None:
        yield active
        return

    with get_engine().begin() as conn:
        token = _active.set(conn)
        try:
            yield conn
        finally:
            _active.reset(token)


def execute_sql_file(filepath: str) -> None:
    """Execute a SQL file against the configured database."""
    path = Path(filepath)
    if not path.exists():
        raise FileNotFoundError(f"SQL file not found: {filepath}")

    with connection() as conn:
        sql_commands = path.read_text().split(";")
        for command in sql_commands:
            cleaned = command.strip()
            if not cleaned:
                continue
            conn.execute(text(cleaned))


def ensure_schema() -> None:
    execute_sql_file(str(SCHEMA_FILE))
